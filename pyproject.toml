[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aridacity"
version = "0.1.0"
description = "Sample-by-sample audio and clock processors: bit crusher, clipper, clock divider and remainder folder"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "synthesis", "bitcrusher", "clock-divider", "wavefolder", "modular"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aridacity"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
