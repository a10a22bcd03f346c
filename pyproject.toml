[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kernlib"
version = "0.1.0"
description = "Small kernel-style utility library: 64-bit division, ASCII ctype, RC4 PRNG, heap sort, printf formatting, bitmaps, linked lists and hash tables."
requires-python = ">=3.10"
dependencies = []
keywords = ["bitmap", "linked list", "hash table", "printf", "rc4", "heap sort", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["kernlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
