[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flock3d"
version = "0.1.0"
description = "Interactive 3D boids flocking simulation with a spatial grid and a live control panel"
requires-python = ">=3.10"
keywords = ["boids", "flocking", "simulation", "artificial life", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]
dependencies = [
    "pygame>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
flock3d = "flock3d.app:main"

[tool.hatch.build.targets.wheel]
packages = ["flock3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
