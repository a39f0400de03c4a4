"""Draw ASCII-art shapes and bitmap-font characters, with an interactive menu."""

__version__ = "0.1.0"