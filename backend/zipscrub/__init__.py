"""
Recursive .zip scrubber.

Walks a directory tree and rewrites every archive in place, swapping PNG
entries for a placeholder image and dropping source assets and metadata files.
"""

__version__ = "0.1.0"
