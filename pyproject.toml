[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortvis"
version = "1.0.0"
description = "Step-by-step sorting algorithm engine with statistics, cursor tracking and tone synthesis"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "algorithms", "visualization", "education", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
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

[tool.hatch.build.targets.wheel]
packages = ["sortvis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
