"""Classic sorting, expression conversion and small numeric algorithms."""

__version__ = "0.1.0"

__all__ = [
    "expressions",
    "linked_list",
    "numeric",
    "radix",
    "sorting",
    "three_way_merge",
]