[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aesdkit"
version = "0.1.0"
description = "Circular command buffer, in-memory character-device model, linked queues and small systems-programming utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "circular-buffer",
    "ring-buffer",
    "linked-list",
    "tail-queue",
    "character-device",
    "subprocess",
    "threading",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aesd-writer = "aesdkit.writer:main"
aesd-validate = "aesdkit.validate:main"
aesd-timestamp = "aesdkit.timestamp:main"
aesd-args-check = "aesdkit.args_check:main"
aesd-structs = "aesdkit.structs:main"
aesd-queue-demo = "aesdkit.queue_demo:main"
aesd-thread-demos = "aesdkit.thread_demos:main"

[tool.hatch.build.targets.wheel]
packages = ["aesdkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
