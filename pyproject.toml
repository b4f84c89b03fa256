[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rvbench"
version = "1.0.0"
description = "Reference models of small benchmark kernels and their datasets, a CRC-32 checksum and semihosting call structures"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "crc32", "semihosting", "reference-model", "riscv", "sgemm", "daxpy"]
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
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rvbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
