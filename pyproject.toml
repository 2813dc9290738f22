[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orientfix"
version = "0.1.0"
description = "Check and correct contig orientation in scaffolds using long-read contig pair links"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bioinformatics",
    "genome assembly",
    "scaffolding",
    "contig orientation",
    "nanopore",
    "long reads",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
orientfix-correct = "orientfix.corrector:main"
orientfix-quast2oo = "orientfix.quast2oo:main"
orientfix-contigmapper = "orientfix.contigmapper:main"
orientfix-oochecker = "orientfix.oochecker:main"
orientfix-tricontig = "orientfix.tricontig:main"

[tool.hatch.build.targets.wheel]
packages = ["orientfix"]

[tool.hatch.build.targets.sdist]
include = ["orientfix", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
