"""Picker name merge policy."""

from .merger import merge_picker_names

__all__ = ["merge_picker_names"]
