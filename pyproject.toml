[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ashaelab"
version = "0.1.0"
description = "Core of a dependently typed elaborator: terms, substitution, unification and name resolution"
requires-python = ">=3.10"
dependencies = []
keywords = ["type theory", "elaboration", "unification", "de bruijn", "compiler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ashaelab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
