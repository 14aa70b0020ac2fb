[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seimei"
version = "0.1.0"
description = "Search, score and filter Japanese given names by stroke-count fortune telling"
requires-python = ">=3.10"
dependencies = []
keywords = ["japanese", "names", "kanji", "seimei-handan", "strokes", "yomi", "mora"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
seimei = "seimei.main:main"

[tool.hatch.build.targets.wheel]
packages = ["seimei"]

[tool.pytest.ini_options]
addopts = "-ra"
