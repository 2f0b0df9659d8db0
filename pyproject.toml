[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "id3tagedit"
version = "1.0.0"
description = "View and edit the basic ID3v2 text frames of MP3 files"
requires-python = ">=3.10"
dependencies = []
keywords = ["mp3", "id3", "id3v2", "tags", "metadata", "audio"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
id3tagedit = "id3tagedit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["id3tagedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
