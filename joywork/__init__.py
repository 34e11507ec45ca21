"""Classic data structures, small algorithms and binary serialization helpers."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "bst",
    "byteswap",
    "gameplay",
    "generic",
    "leetcode",
    "reflection",
    "splay",
    "streams",
    "textquery",
    "vector",
]