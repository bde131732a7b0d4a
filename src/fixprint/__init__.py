"""fixprint - streaming FIX protocol log printer and summarizer."""

__version__ = "0.1.0"
