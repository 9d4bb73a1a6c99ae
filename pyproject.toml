[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "winix"
version = "0.1.0"
description = "Unix-style system commands and a terminal dashboard for Windows and other platforms"
requires-python = ">=3.10"
keywords = [
    "unix",
    "windows",
    "shell",
    "ps",
    "nice",
    "tail",
    "sudo",
    "sensors",
    "dashboard",
    "tui",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: System Administrators",
    "Operating System :: Microsoft :: Windows",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: System :: Monitoring",
    "Topic :: Utilities",
]
dependencies = [
    "psutil",
    "termcolor",
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
winix = "winix.tui:main"
sudo = "winix.sudo:main"

[tool.hatch.build.targets.wheel]
packages = ["winix"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
