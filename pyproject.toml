[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primesieve_nt"
version = "0.4.4"
description = "Prime sieving, prime counting, exact integer roots and integer factorization algorithms."
requires-python = ">=3.10"
dependencies = []
keywords = ["mathematics", "primes", "number-theory", "factorization", "sieve"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["primesieve_nt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
