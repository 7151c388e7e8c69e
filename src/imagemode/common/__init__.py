"""Shared enumerations."""

from imagemode.common.enums import ContentMode

__all__ = ["ContentMode"]
