[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "d2calc"
version = "0.1.0"
description = "Weapon perk modifiers, encounter power scaling and game enums for Destiny 2 damage calculations"
requires-python = ">=3.10"
dependencies = []
keywords = ["destiny2", "calculator", "weapons", "perks", "damage"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["d2calc"]

[tool.pytest.ini_options]
addopts = "-ra"
