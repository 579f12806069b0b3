[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "balafon"
version = "0.1.0"
description = "Building blocks of a small MIDI control language: lexer, syntax tree nodes, note properties, commands, MusicXML model, bars and events."
requires-python = ">=3.10"
dependencies = []
keywords = ["midi", "music", "language", "lexer", "musicxml", "notation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["balafon"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
