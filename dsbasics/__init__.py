"""Classic data structures (arrays, linked lists, queues) and stack algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_lists", "stack_algorithms", "queues", "cli"]