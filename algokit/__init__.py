"""Classic algorithm problem solutions and a red-black tree set of integers."""

__version__ = "0.1.0"