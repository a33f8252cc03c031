"""Plain linked lists, queues and stacks."""

__version__ = "0.1.0"