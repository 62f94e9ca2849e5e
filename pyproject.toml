[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdfconform"
version = "0.1.0"
description = "PDF geometry primitives, PDF versions and PDF/A and PDF/UA conformance rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["pdf", "pdf/a", "pdf/ua", "validation", "conformance", "geometry"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pdfconform"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
