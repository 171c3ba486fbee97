import pytest

from minishell.environment import Environment


def test_entries_keep_order():
    environment = Environment(["A=1", "B=2", "C=3"])
    assert list(environment) == ["A=1", "B=2", "C=3"]


def test_len_counts_entries():
    assert len(Environment(["A=1", "B=2"])) == 2


def test_none_gives_empty_environment():
    environment = Environment(None)
    assert len(environment) == 0
    assert list(environment) == []


def test_default_is_empty():
    assert len(Environment()) == 0


def test_source_list_is_copied():
    source = ["A=1"]
    environment = Environment(source)
    source.append("B=2")
    assert list(environment) == ["A=1"]


def test_copy_is_equal_and_independent():
    original = Environment(["PATH=/bin", "HOME=/home/user"])
    duplicate = original.copy()
    assert duplicate == original
    assert duplicate is not original
    assert list(duplicate) == list(original)


def test_from_mapping_joins_names_and_values():
    environment = Environment.from_mapping({"HOME": "/home/user", "USER": "user"})
    assert list(environment) == ["HOME=/home/user", "USER=user"]


def test_from_mapping_empty_value():
    environment = Environment.from_mapping({"EMPTY": ""})
    assert list(environment) == ["EMPTY="]


@pytest.mark.parametrize("entries", [[], ["X=1"], ["X=1", "Y=2", "Z=3"]])
def test_len_matches_iteration(entries):
    environment = Environment(entries)
    assert len(environment) == len(list(environment))