[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swipegest"
version = "0.1.0"
description = "Map multi-touch gestures to desktop actions such as maximising windows, switching desktops, sending keys and running commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["gestures", "touchpad", "touchscreen", "multitouch", "desktop", "window-manager"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["swipegest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
