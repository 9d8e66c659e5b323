[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cortexcache"
version = "0.1.0"
description = "Fixed-block slab allocator that stores cache entries (TTL, key and value) in one contiguous region"
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "slab", "allocator", "ttl", "memory"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
cortexd = "cortexcache.daemon:main"

[tool.hatch.build.targets.wheel]
packages = ["cortexcache"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
