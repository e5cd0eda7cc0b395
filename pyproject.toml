[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lottieview"
version = "0.1.0"
description = "Lottie gradient and bezier decoding, viewer gesture and frame-time helpers, and a downloader for sample animations"
requires-python = ">=3.10"
dependencies = []
keywords = ["lottie", "animation", "gradient", "bezier", "touch", "gestures", "download"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lottieview-download = "lottieview.download:main"

[tool.hatch.build.targets.wheel]
packages = ["lottieview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
