"""Decomposition of URI strings into raw components."""

from .RawComponents import RawComponents
from .split_components import split_components
from .URI_PATTERN import URI_PATTERN

__all__ = ["URI_PATTERN", "RawComponents", "split_components"]
