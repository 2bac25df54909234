[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfsolve"
version = "0.1.0"
description = "Solvers for a collection of competitive programming problems, usable as functions or as stdin/stdout commands."
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "puzzles", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
cfsolve-2078b = "cfsolve.problem_2078b:main"
cfsolve-2084b = "cfsolve.problem_2084b:main"
cfsolve-2086b = "cfsolve.problem_2086b:main"
cfsolve-2091c = "cfsolve.problem_2091c:main"
cfsolve-2091d = "cfsolve.problem_2091d:main"
cfsolve-2092b = "cfsolve.problem_2092b:main"
cfsolve-2093c = "cfsolve.problem_2093c:main"
cfsolve-2094d = "cfsolve.problem_2094d:main"
cfsolve-2096b = "cfsolve.problem_2096b:main"
cfsolve-2106a = "cfsolve.problem_2106a:main"
cfsolve-2106b = "cfsolve.problem_2106b:main"
cfsolve-2106c = "cfsolve.problem_2106c:main"

[tool.hatch.build.targets.wheel]
packages = ["cfsolve"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
