[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "rgengine"
version = "0.1.0"
description = "Engine utilities, shader source preprocessing and a shader reflection header generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["shader", "glsl", "code-generation", "reflection", "game-engine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shadergen = "rgengine.shadergen:main"

[tool.setuptools.packages.find]
include = ["rgengine*"]

[tool.pytest.ini_options]
addopts = "-ra"
