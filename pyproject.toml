[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cepweather"
version = "0.1.0"
description = "HTTP service that looks up a Brazilian zipcode (CEP) and reports the current temperature of its city"
requires-python = ">=3.10"
dependencies = []
keywords = ["cep", "zipcode", "weather", "temperature", "wsgi", "viacep"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cepweather = "cepweather.server:main"

[tool.hatch.build.targets.wheel]
packages = ["cepweather"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
