[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "telemetry-sidecar"
version = "0.1.0"
description = "Parse metric lines, buffer them in SQLite and drain them, with a client that streams metric lines to a Unix domain socket."
requires-python = ">=3.10"
dependencies = []
keywords = ["metrics", "telemetry", "sidecar", "line-protocol", "sqlite", "unix-socket"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
telemetry-sidecar-client = "telemetry_sidecar.client:main"

[tool.hatch.build.targets.wheel]
packages = ["telemetry_sidecar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
