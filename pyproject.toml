[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ringvideo"
version = "1.0"
description = "I420 raw video frames, YUV4MPEG2 file reading and on-screen display"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["video", "yuv", "i420", "yuv4mpeg", "y4m", "yuyv", "display"]
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
    "Topic :: Multimedia :: Video :: Display",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ringvideo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
