[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lenna"
version = "0.1.0"
description = "Plugin-driven batch image processing: input, edit and output plugins chained into a pipeline"
requires-python = ">=3.10"
keywords = ["image", "batch", "pipeline", "plugins", "photo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "numpy",
    "pillow",
    "scipy",
    "platformdirs",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lenna = "lenna.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lenna"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
