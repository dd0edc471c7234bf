#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderer options for orgexport."""

from orgexport.options.base import BaseRendererOptions, CloneFrozenMixin
from orgexport.options.org import OrgRendererOptions

__all__ = ["BaseRendererOptions", "CloneFrozenMixin", "OrgRendererOptions"]
