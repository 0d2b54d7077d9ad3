[build-system]
requires = ["hatchling>=1.18"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic searching, sorting and data-structure exercises with small command-line demos"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "searching",
    "data structures",
    "knuth-morris-pratt",
    "boyer-moore",
    "polyphase merge",
    "hash table",
    "eight queens",
    "tower of hanoi",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest>=7"]

[project.scripts]
algolab-text-search = "algolab.text_search:main"
algolab-sorting = "algolab.sorting:main"
algolab-polyphase = "algolab.polyphase:main"
algolab-queens = "algolab.puzzles:queens_main"
algolab-hanoi = "algolab.puzzles:hanoi_main"
algolab-exercises = "algolab.exercises:main"
algolab-searching = "algolab.searching:main"
algolab-hashtable = "algolab.hashtable:main"
algolab-ringlist = "algolab.ringlist:main"
algolab-containers = "algolab.containers:main"
algolab-dlist = "algolab.dlist:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.hatch.build.targets.sdist]
include = ["algolab", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
