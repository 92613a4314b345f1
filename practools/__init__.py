"""Small command-line tools, log-forwarding building blocks and calculation exercises."""

__version__ = "0.1.0"