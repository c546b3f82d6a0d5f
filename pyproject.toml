[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unfuzzy"
version = "3.0.0"
description = "Fuzzy logic building blocks: fuzzy sets, norms, implications, linguistic variables, a rule-base inference engine and layered node networks"
requires-python = ">=3.10"
dependencies = []
keywords = ["fuzzy logic", "fuzzy sets", "inference", "t-norm", "s-norm", "implication", "rule base"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["unfuzzy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
