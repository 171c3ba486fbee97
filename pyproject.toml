[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minishell"
version = "0.1.0"
description = "Shell built-ins (echo, env, pwd, exit) with an environment snapshot, a printf-style formatter, a line reader and C-style string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "builtins", "echo", "env", "printf", "line-reader"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minishell = "minishell.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minishell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
