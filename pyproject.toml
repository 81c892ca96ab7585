[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soloader"
version = "0.1.0"
description = "Helpers for the runtime conventions Android-style native code expects: bionic errno and ctype tables, 64-bit time, EGL query answers, assets and I/O records"
requires-python = ">=3.10"
dependencies = []
keywords = ["android", "bionic", "errno", "ctype", "time64", "egl", "compatibility"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["soloader"]

[tool.pytest.ini_options]
addopts = "-ra"
