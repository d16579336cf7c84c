"""
httpie-lite.

A small command-line HTTP client: send one GET or POST, render the response.
"""

__version__ = "0.1.0"
