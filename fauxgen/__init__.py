"""Seedable fake numbers, UUIDs, network addresses, images and JSON, with a registry of named lookups."""

__version__ = "0.1.0"

__all__ = [
    "catalog",
    "helpers",
    "image",
    "internet",
    "jsonfile",
    "lookup",
    "misc",
    "number",
]