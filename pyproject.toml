[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "progbasics"
version = "0.1.0"
description = "Small, runnable programs that teach programming fundamentals: games, iterators, polymorphism and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "teaching",
    "snake",
    "tictactoe",
    "iterators",
    "polymorphism",
    "fundamentals",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
progbasics-snake = "progbasics.snake_console:main"
progbasics-tictactoe = "progbasics.tictactoe:main"
progbasics-traffic-light = "progbasics.traffic_light:main"
progbasics-graph = "progbasics.graph_iter:main"
progbasics-chunked = "progbasics.chunked:main"
progbasics-shop = "progbasics.shop:main"
progbasics-quiz = "progbasics.quiz:main"
progbasics-item-ops = "progbasics.item_ops:main"
progbasics-menus = "progbasics.menus:main"
progbasics-arrays = "progbasics.arrays:main"

[tool.hatch.build.targets.wheel]
packages = ["progbasics"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
