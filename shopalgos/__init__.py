"""Small algorithms for shop and workplace data."""

__version__ = "0.1.0"
__all__ = [
    "anagrams",
    "busy_time",
    "maxstack",
    "meetings",
    "popularity",
    "price_tree",
    "suggestions",
]