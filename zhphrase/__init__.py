"""Custom phrases, candidate merging and input heuristics for pinyin input."""

__version__ = "0.1.0"
__all__ = [
    "candidates",
    "config",
    "customphrase",
    "heuristics",
    "preedit",
    "selection",
]