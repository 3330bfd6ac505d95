"""Console rendering of validation reports."""

from .console import render_error, render_failure, render_success, use_color

__all__ = ["render_error", "render_failure", "render_success", "use_color"]
