[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wpplugingen"
version = "0.1.0"
description = "Lay out a WordPress plugin project with a Composer PSR-4 autoload setup"
requires-python = ">=3.10"
dependencies = []
keywords = ["wordpress", "plugin", "generator", "composer", "psr-4"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wp-plugin-generator = "wpplugingen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wpplugingen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
