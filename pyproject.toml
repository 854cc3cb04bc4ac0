[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tunelib"
version = "0.1.0"
description = "Music library browsing, regex search, tag filters, selection and play-queue editing logic"
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "library", "queue", "playlist", "search", "filter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tunelib"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
