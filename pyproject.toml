[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clinvardl"
version = "1.0.0"
description = "Building blocks for querying NCBI Entrez (ESearch, ESummary, EPost) for ClinVar variant summaries"
requires-python = ">=3.10"
keywords = ["clinvar", "entrez", "ncbi", "eutils", "variants", "bioinformatics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["clinvardl"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
