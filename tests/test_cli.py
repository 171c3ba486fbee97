import os

from minishell.cli import main


def test_main_prints_environment_entries(monkeypatch, capsys):
    monkeypatch.setenv("MINISHELL_SAMPLE", "value")
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "MINISHELL_SAMPLE=value" in lines


def test_main_reports_home_user_shell(monkeypatch, capsys):
    monkeypatch.setenv("HOME", "/home/user")
    monkeypatch.setenv("USER", "user")
    monkeypatch.setenv("SHELL", "/bin/sh")
    main()
    out = capsys.readouterr().out
    assert "\n\n\n HOME = /home/user\n" in out
    assert "\n USER = user\n" in out
    assert out.endswith("\n SHELL = /bin/sh\n")


def test_main_missing_variable_prints_null(monkeypatch, capsys):
    monkeypatch.delenv("USER", raising=False)
    main(None)
    assert "\n USER = (null)\n" in capsys.readouterr().out


def test_main_lists_every_variable(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    for name, value in os.environ.items():
        if "\n" not in value:
            assert f"{name}={value}" in lines