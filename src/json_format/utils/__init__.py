"""Utility functions for the JSON format codec."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
