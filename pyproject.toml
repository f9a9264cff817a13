[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "perpustakaan"
version = "0.1.0"
description = "Console library lending system with priority borrower queues, in three storage variants"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "library",
    "perpustakaan",
    "priority-queue",
    "linked-list",
    "data-structures",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
perpustakaan-sll = "perpustakaan.sll.menu:main"
perpustakaan-dll = "perpustakaan.dll.menu:main"
perpustakaan-array = "perpustakaan.arr.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["perpustakaan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
