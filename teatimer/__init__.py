"""teatimer — a terminal stopwatch that counts up in seconds."""

__version__ = "0.1.0"
__author__ = "teatimer developers"
