# Scanner module
# Entry filtering and in-place archive rewriting

from .errors import PlaceholderMissingError, RewriteError, ScrubError
from .filters import classify_entry, should_exclude
from .rewriter import load_placeholder, rewrite_archive

__all__ = [
    "PlaceholderMissingError",
    "RewriteError",
    "ScrubError",
    "classify_entry",
    "load_placeholder",
    "rewrite_archive",
    "should_exclude",
]
