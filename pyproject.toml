[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cherrygame"
version = "1.3.18"
description = "Building blocks for game servers: result codes, errors, encoders, thread-safe maps, file and HTTP helpers, and hot-reloading data configuration."
requires-python = ">=3.10"
keywords = ["game-server", "base58", "zlib", "data-config", "hot-reload", "redis"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "requests>=2.28",
    "redis>=4.5",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[tool.hatch.build.targets.wheel]
packages = ["cherrygame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
