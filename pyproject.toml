[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bookshelf-api"
version = "0.1.0"
description = "A small HTTP API for managing books and categories behind basic authentication, stored in SQLite."
requires-python = ">=3.10"
keywords = ["books", "categories", "rest", "api", "flask", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bookshelf-api = "bookshelf_api.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bookshelf_api"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
