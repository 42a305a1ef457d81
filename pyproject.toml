[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tempwatch"
version = "0.1.0"
description = "Streaming temperature monitor that tracks sensor readings in a min-max heap and alerts on isolated high spikes"
requires-python = ">=3.10"
dependencies = []
keywords = ["temperature", "sensors", "monitoring", "min-max heap", "anomaly detection"]
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
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tempwatch = "tempwatch.stream:main"

[tool.hatch.build.targets.wheel]
packages = ["tempwatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
