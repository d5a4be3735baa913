"""Centralized exceptions for bashguide."""


class BashGuideError(Exception):
    """Base exception for all bashguide errors."""
