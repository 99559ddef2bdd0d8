[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classicciphers"
version = "0.1.0"
description = "Classical text ciphers: Playfair, Vigenère, a nibble-swapping bit cipher and a layered combination of them."
requires-python = ">=3.10"
dependencies = []
keywords = ["cipher", "playfair", "vigenere", "classical cryptography", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
classicciphers = "classicciphers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["classicciphers"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
