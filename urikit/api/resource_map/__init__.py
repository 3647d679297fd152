"""Mapping keyed by URI identity."""

from .ResourceMap import ResourceMap, ResourceMapKeyFn

__all__ = ["ResourceMap", "ResourceMapKeyFn"]
