[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestkit"
version = "0.1.0"
description = "Solvers for a set of competitive programming problems, usable as functions or command-line filters"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "competitive-programming",
    "algorithms",
    "fenwick-tree",
    "union-find",
    "dynamic-programming",
    "sieve",
    "breadth-first-search",
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
test = ["pytest"]

[project.scripts]
contestkit-anonymous = "contestkit.anonymous:main"
contestkit-budget = "contestkit.budget:main"
contestkit-disaster-dragon = "contestkit.disaster_dragon:main"
contestkit-flood = "contestkit.flood:main"
contestkit-guess = "contestkit.guess:main"
contestkit-investor = "contestkit.investor:main"
contestkit-knight = "contestkit.knight:main"
contestkit-lightning-quiz = "contestkit.lightning_quiz:main"
contestkit-lumpinee = "contestkit.lumpinee:main"
contestkit-paradox = "contestkit.paradox:main"
contestkit-sandwich = "contestkit.sandwich:main"
contestkit-serious-school = "contestkit.serious_school:main"
contestkit-sleepy = "contestkit.sleepy:main"
contestkit-spanish-mafia = "contestkit.spanish_mafia:main"
contestkit-street-fighter = "contestkit.street_fighter:main"

[tool.hatch.build.targets.wheel]
packages = ["contestkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
