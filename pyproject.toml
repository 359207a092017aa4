[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autocrab"
version = "0.1.0"
description = "Guarded file, shell, web and headless-browser tools with allow-lists, plus UI element tree types"
requires-python = ">=3.10"
dependencies = [
    "httpx",
]
keywords = ["assistant", "tools", "automation", "sandbox", "allow-list", "headless-browser"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "respx",
]

[tool.hatch.build.targets.wheel]
packages = ["autocrab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
