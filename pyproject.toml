[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vokabeltrainer"
version = "0.1.0"
description = "Spanish-German vocabulary trainer with a SQLite word store and a small JSON HTTP API"
requires-python = ">=3.10"
keywords = ["vocabulary", "flashcards", "spanish", "german", "sqlite", "trainer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Education",
    "Natural Language :: German",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
vokabeltrainer = "vokabeltrainer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vokabeltrainer"]

[tool.pytest.ini_options]
addopts = "-ra"
