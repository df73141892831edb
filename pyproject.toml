[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glossa"
version = "0.1.0"
description = "Phonetic transcription with diacritic placement, finite automata and heterogeneous coproducts"
requires-python = ">=3.10"
dependencies = []
keywords = ["phonetics", "ipa", "diacritics", "automata", "nfa", "dfa", "linguistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glossa"]

[tool.pytest.ini_options]
addopts = "-ra"
