"""Library lending: book catalogue, prioritised borrower queues, activity history and terminal menus."""

__version__ = "0.1.0"