# model/__init__.py

"""
Domain objects for the calculator's editing surface. The editor state is a
plain immutable value; the logic package computes what to display from it.
"""

from .editor_state import EditorState

__all__ = [
    "EditorState",
]
