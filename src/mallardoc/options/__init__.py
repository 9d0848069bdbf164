#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for mallardoc rendering."""

from mallardoc.options.base import BaseRendererOptions, CloneFrozenMixin
from mallardoc.options.mallard import MallardRendererOptions

__all__ = ["BaseRendererOptions", "CloneFrozenMixin", "MallardRendererOptions"]
