"""
Web front-end for the probability calculator.

Serves the calculator form and the JSON endpoints behind it.
"""

from .server import app

__all__ = ["app"]
