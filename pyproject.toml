[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oasroutes"
version = "0.1.0"
description = "Declare routes with their OpenAPI operations and serve the generated OpenAPI 3.0 document over WSGI"
requires-python = ">=3.10"
dependencies = []
keywords = ["openapi", "oas", "wsgi", "routing", "documentation", "api"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Middleware",
    "Topic :: Software Development :: Documentation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oasroutes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
