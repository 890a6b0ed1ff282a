[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solidkit"
version = "1.0.0"
description = "LZHUF compression, binary-to-C header conversion and instrumented sorting algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["lzhuf", "lzss", "huffman", "compression", "bin2c", "sorting"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
bin2c = "solidkit.bin2c:main"
sortdemo = "solidkit.sortdemo:main"

[tool.hatch.build.targets.wheel]
packages = ["solidkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
