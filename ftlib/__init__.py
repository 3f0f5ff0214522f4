"""Character, byte-buffer, string, linked-list and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "text", "linked_list", "next_line"]