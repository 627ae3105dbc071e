[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aafgui"
version = "0.1.0"
description = "A small GUI toolkit with labels, buttons and text inputs on top of pygame"
requires-python = ">=3.10"
keywords = ["gui", "pygame", "widgets", "text-input", "layout"]
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
    "Topic :: Software Development :: User Interfaces",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
aafgui-demo = "aafgui.example:main"

[tool.hatch.build.targets.wheel]
packages = ["aafgui"]

[tool.pytest.ini_options]
addopts = "-ra"
