[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alabkit"
version = "0.1.0"
description = "Small command-line exercises: a JSON-backed login system and a set of threading demonstrations."
requires-python = ">=3.10"
dependencies = []
keywords = ["login", "authentication", "threading", "locks", "concurrency", "examples"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
alab-hello-world = "alabkit.hello_world:main"
alab-variables = "alabkit.variables:main"
alab-login = "alabkit.login:main"
alab-login-manager = "alabkit.login_manager:main"
alab-deadlocks = "alabkit.deadlocks:main"
alab-divide-work = "alabkit.divide_work:main"
alab-footgun = "alabkit.footgun:main"
alab-hello = "alabkit.hello:main"
alab-mutexes = "alabkit.mutexes:main"
alab-rwlocks = "alabkit.rwlocks:main"
alab-scope-threads = "alabkit.scope_threads:main"
alab-thread-builder = "alabkit.thread_builder:main"

[tool.hatch.build.targets.wheel]
packages = ["alabkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
