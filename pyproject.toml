[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sugarcane"
version = "0.1.0"
description = "Validate, pair and track NFT asset folders: metadata checks, upload planning and on-chain verification helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["nft", "metadata", "validation", "assets", "upload", "cache"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sugarcane-validate = "sugarcane.validate:main"

[tool.hatch.build.targets.wheel]
packages = ["sugarcane"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
