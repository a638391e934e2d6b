"""
Collection retrieval.

This package loads articles, categories and tags from the content API
or from local JSON exports.
"""

from .fetcher import FetchResult, fetch_json, load_site_data, load_site_data_from_files

__all__ = [
    "FetchResult",
    "fetch_json",
    "load_site_data",
    "load_site_data_from_files",
]
