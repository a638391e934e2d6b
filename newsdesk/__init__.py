"""
Newsdesk - front page layout for published articles.

This package turns a flat, chronologically ordered list of published
articles into a multi-zone page layout: a hero story, a secondary pair,
a slider, a "recent stories" sidebar and repeating three-column blocks.

Main entry point is the CLI via `newsdesk render` command.

Example:
    $ newsdesk render --posts posts.json --categories categories.json -o out/
"""

__all__ = ["__version__", "partition", "build_tree", "resolve_names", "resolve_image", "excerpt"]
__version__ = "0.1.0"

from .core.categories import build_tree
from .core.excerpt import excerpt
from .core.images import resolve_image
from .core.layout import partition
from .core.references import resolve_names
