[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stripslicer"
version = "0.1.0"
description = "Cut tall images into strips along uniform rows"
requires-python = ">=3.10"
keywords = ["image", "slicing", "webtoon", "crop", "strip", "png"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]
dependencies = [
    "numpy",
    "pillow",
    "tqdm",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
stripslicer = "stripslicer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stripslicer"]

[tool.pytest.ini_options]
addopts = "-ra"
