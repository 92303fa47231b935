[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quickparse"
version = "0.1.0"
description = "A small regex-driven lexer and grammar-driven parser toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "parser", "tokenizer", "grammar", "regex", "cst"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quickparse = "quickparse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quickparse"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
