"""Arrays, linked lists, stacks, queues, binary search trees, expression checks and graph traversal."""

__version__ = "0.1.0"