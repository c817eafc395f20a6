[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "peril"
version = "0.1.0"
description = "Game logic and message-broker helpers for Peril, a multiplayer turn-based war game played over RabbitMQ"
requires-python = ">=3.10"
keywords = ["game", "strategy", "rabbitmq", "amqp", "pubsub"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]
dependencies = [
    "pika",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["peril"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
