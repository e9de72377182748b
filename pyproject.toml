[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aircleaner"
version = "0.1.0"
description = "A Lightning Air Cleaner: an arcade game where chained lightning clears falling dust"
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "incremental", "lightning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
aircleaner = "aircleaner.app:main"

[tool.hatch.build.targets.wheel]
packages = ["aircleaner"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
