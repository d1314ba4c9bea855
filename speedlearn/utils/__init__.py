"""Shared helpers for speedlearn."""

from speedlearn.utils.math import round_half_up

__all__ = ["round_half_up"]
