[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "loopunfold"
version = "0.1.0"
description = "Multi-threaded dense matrix multiplication benchmark with selectable loop orders"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "multiplication", "benchmark", "threads", "loop order"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
loopunfold = "loopunfold.cli:main"

[tool.setuptools.packages.find]
include = ["loopunfold*"]

[tool.pytest.ini_options]
addopts = "-ra"
