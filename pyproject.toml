[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oscillatorlab"
version = "0.1.0"
description = "Metropolis sampling, normal-mode transforms and dispersion relations for coupled oscillator chains, plus coupled fermion operators"
requires-python = ">=3.10"
keywords = ["physics", "quantum", "harmonic oscillator", "metropolis", "monte carlo", "normal modes", "fermions", "jordan-wigner"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
oscillatorlab-fermions = "oscillatorlab.fermions:main"

[tool.hatch.build.targets.wheel]
packages = ["oscillatorlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
