[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filecipher"
version = "1.0.0"
description = "Password-based AES-256 file encryption with a pure-Python AES implementation"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "encryption", "pbkdf2", "cbc", "file", "password", "cryptography"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
filecipher = "filecipher.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["filecipher"]

[tool.hatch.build.targets.sdist]
include = ["filecipher", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
