"""
Diff review rendering.

Turns a learner's submitted diff into one highlighted, read-only view per
changed file.
"""

from diffreview.diff_renderer import DiffRenderer, render_diff
from diffreview.display_unit import DisplayUnit
from diffreview.review_settings import ReviewSettings

__all__ = [
    "DiffRenderer",
    "DisplayUnit",
    "ReviewSettings",
    "render_diff",
]
