"""Classic algorithms: graphs, searching, sorting, arithmetic, patterns, greetings and a binary search tree."""

__version__ = "0.1.0"