"""Configuration package for fixprint."""
