[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinygrad_scalar"
version = "0.1.0"
description = "A tiny scalar-valued reverse-mode autograd engine with a small neural network library"
requires-python = ">=3.10"
dependencies = []
keywords = ["autograd", "backpropagation", "neural-network", "mlp", "automatic-differentiation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tinygrad_scalar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
