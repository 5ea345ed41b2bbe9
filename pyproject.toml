[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leetkit"
version = "0.1.0"
description = "Classic algorithm exercises as small functions and command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "exercises",
    "interview",
    "linked-list",
    "binary-tree",
]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
leetkit-rank-transform = "leetkit.rank_transform:main"
leetkit-letter-combinations = "leetkit.letter_combinations:main"
leetkit-four-sum = "leetkit.four_sum:main"
leetkit-valid-parentheses = "leetkit.valid_parentheses:main"
leetkit-merge-lists = "leetkit.merge_lists:main"
leetkit-remove-duplicates = "leetkit.remove_duplicates:main"
leetkit-str-str = "leetkit.str_str:main"
leetkit-search-insert = "leetkit.search_insert:main"
leetkit-inorder-traversal = "leetkit.inorder_traversal:main"

[tool.hatch.build.targets.wheel]
packages = ["leetkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
