[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "suffixtable"
version = "0.1.0"
description = "Public suffix and eTLD+1 lookups over a compact, bit-packed suffix table."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "public suffix",
    "psl",
    "etld",
    "etld+1",
    "domain",
    "dns",
    "cookies",
]
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
    "Topic :: Internet :: Name Service (DNS)",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["suffixtable"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
