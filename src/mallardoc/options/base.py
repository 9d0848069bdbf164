"""Base classes for renderer options.

This module defines the foundation classes for the frozen option objects
used to configure rendering.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mallardoc.constants import DEFAULT_STANDALONE


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
    standalone : bool, default=True
        Emit a complete document (declaration, root element and metadata).
        When False only the rendered body content is produced, for embedding
        into another page.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    standalone: bool = field(
        default=DEFAULT_STANDALONE,
        metadata={
            "help": "Emit a complete document instead of embeddable body content",
            "cli_name": "embedded",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate base renderer options."""
        pass
