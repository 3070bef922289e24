# src/taskboard/__init__.py

"""Task-management core: an owned task collection plus a pure query pipeline."""

__version__ = "0.1.0"
