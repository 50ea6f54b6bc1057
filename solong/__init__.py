"""A tile-based collect-and-escape puzzle game: map validation, game rules,
pygame rendering, and helper modules for characters, byte buffers, strings,
formatted output, line reading and linked lists."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "strings",
    "printf",
    "linereader",
    "linkedlist",
    "output",
    "gamemap",
    "game",
    "render",
]