[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grammarkit"
version = "0.1.0"
description = "Context-free grammars and pushdown automata: CYK membership, LL(1) tables and PDA-to-CFG conversion"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "context-free grammar",
    "pushdown automaton",
    "CYK",
    "LL(1)",
    "FIRST and FOLLOW",
    "formal languages",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grammarkit = "grammarkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["grammarkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
