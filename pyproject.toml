[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glvmul"
version = "0.1.0"
description = "Scalar multiplication on BN254 and P-256 with a hinted half-GCD (fake GLV) check and a Joye ladder, evaluated with the checks a circuit would make"
requires-python = ">=3.10"
dependencies = []
keywords = ["elliptic curves", "glv", "half-gcd", "scalar multiplication", "bn254", "p256"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["glvmul"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
