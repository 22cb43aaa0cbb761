[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qrlwallet"
version = "0.1.0"
description = "Wallet primitives for QRL: wallet types, descriptors, seeds, hashing and addresses"
requires-python = ">=3.10"
dependencies = []
keywords = ["qrl", "wallet", "descriptor", "seed", "address", "post-quantum"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["qrlwallet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
