"""Validate and rank integers for push_swap, with stack operations and helpers."""

__version__ = "0.1.0"