[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gfmul128"
version = "0.1.0"
description = "Multiplication in GF(2^128): schoolbook, lookup-table, Karatsuba and hybrid multipliers, with a micro-benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["gf128", "galois-field", "gcm", "ghash", "lrw", "xts", "karatsuba", "finite-field"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gfmul128-bench = "gfmul128.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["gfmul128"]

[tool.hatch.build.targets.sdist]
include = ["gfmul128", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["gfmul128"]
