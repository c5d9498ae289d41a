[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "abstractions_kit"
version = "0.1.0"
description = "Small classic data abstractions and algorithms: number codes, editor buffers, stacks, k-d trees and 2D ICP."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "gray-code",
    "roman-numerals",
    "editor-buffer",
    "stack",
    "kd-tree",
    "icp",
    "point-cloud",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
abstractions-codes = "abstractions_kit.codes:main"
abstractions-roman = "abstractions_kit.roman:main"
abstractions-points = "abstractions_kit.pointfiles:main"

[tool.hatch.build.targets.wheel]
packages = ["abstractions_kit"]

[tool.pytest.ini_options]
addopts = "-ra"
