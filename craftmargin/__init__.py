# craftmargin/__init__.py
"""craftmargin: pricing and profit advisory for small-batch makers."""

__version__ = "0.1.0"
