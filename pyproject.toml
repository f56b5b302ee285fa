[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "multilanggen"
version = "0.1.0"
description = "Generate one HTML page per language from a single template and JSON language files"
requires-python = ">=3.10"
keywords = ["i18n", "multilingual", "html", "static-site", "templates", "jinja2"]
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
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Software Development :: Internationalization",
]
dependencies = [
    "jinja2>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
multilang-gen = "multilanggen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["multilanggen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
