[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "poolkit"
version = "0.1.0"
description = "Object pools, singletons, registries and monostates for Python programs"
requires-python = ">=3.10"
dependencies = []
keywords = ["object pool", "singleton", "multiton", "registry", "monostate", "design patterns"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
poolkit-game = "poolkit.game:main"
poolkit-clock = "poolkit.clock:main"
poolkit-printers = "poolkit.printers:main"

[tool.hatch.build.targets.wheel]
packages = ["poolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
