"""Classic searching, sorting and data-structure exercises with command-line demos."""

__version__ = "0.1.0"

__all__ = [
    "containers",
    "dlist",
    "exercises",
    "hashtable",
    "polyphase",
    "puzzles",
    "ringlist",
    "searching",
    "sorting",
    "text_search",
]