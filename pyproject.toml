[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "perpustakaan"
version = "0.1.0"
description = "A small library lending system: book catalogue, prioritised borrower queue and activity history, driven from an interactive terminal menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "lending", "books", "queue", "priority", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
perpustakaan = "perpustakaan.menu:main"
perpustakaan-array = "perpustakaan.array_menu:main"

[tool.hatch.build.targets.wheel]
packages = ["perpustakaan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
