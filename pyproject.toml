[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wxanim"
version = "0.1.0"
description = "Tk image gallery viewer with eased slide transitions, plus easing functions, an animator and a line chart widget"
requires-python = ">=3.10"
keywords = ["animation", "easing", "image gallery", "tkinter", "chart"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wxanim = "wxanim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wxanim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
