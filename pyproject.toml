[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "faviconbuddy"
version = "1.0.0"
description = "Embed website favicons into exported browser bookmark files"
requires-python = ">=3.10"
keywords = ["favicon", "bookmark", "browser", "netscape-bookmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Browsers",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml>=6.0",
    "httpx>=0.24",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "pytest-asyncio>=0.21",
    "respx>=0.20",
]

[tool.hatch.build.targets.wheel]
packages = ["faviconbuddy"]

[tool.hatch.build.targets.sdist]
include = ["faviconbuddy", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
