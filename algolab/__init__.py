"""Algorithm and data-structure exercises: grid rectangles, searching, sorting, list editing and a task list, with command-line drivers."""

__version__ = "0.1.0"