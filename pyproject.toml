[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "guessnet"
version = "0.1.0"
description = "A number guessing game played over TCP or UDP"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "guessing", "tcp", "udp", "sockets", "networking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
guessnet-tcp-server = "guessnet.tcpserver:main"
guessnet-tcp-client = "guessnet.tcpclient:main"
guessnet-udp-server = "guessnet.udpserver:main"
guessnet-udp-client = "guessnet.udpclient:main"

[tool.hatch.build.targets.wheel]
packages = ["guessnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
