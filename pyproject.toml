[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shopalgos"
version = "0.1.0"
description = "Small algorithms for shop and workplace data: anagram grouping, meeting overlaps, a max stack, price range queries, pair suggestions, busy streaks and popularity trends."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "anagrams", "intervals", "binary-search-tree", "stack", "two-sum"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shopalgos"]

[tool.pytest.ini_options]
addopts = "-ra"
