[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wavlsb"
version = "0.1.0"
description = "Hide text in WAV audio by least-significant-bit substitution, and recover it again"
requires-python = ">=3.10"
dependencies = []
keywords = ["steganography", "wav", "lsb", "audio", "riff"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wavlsb = "wavlsb.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wavlsb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
