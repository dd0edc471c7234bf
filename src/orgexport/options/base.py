"""Base classes for renderer options.

This module defines the foundation classes for the options used by the Org
renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from orgexport.constants import DEFAULT_FAIL_ON_UNKNOWN_PARTS


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    fail_on_unknown_parts : bool, default=False
        Whether to raise RenderingError when an attributed string contains a
        part of an unrecognized type. If False (default), a diagnostic is
        emitted and the part renders as empty text.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    fail_on_unknown_parts: bool = field(
        default=DEFAULT_FAIL_ON_UNKNOWN_PARTS,
        metadata={
            "help": "Raise RenderingError on unrecognized attributed-string parts instead of emitting a diagnostic",
            "importance": "advanced",
        },
    )
