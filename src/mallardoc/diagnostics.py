#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mallardoc/diagnostics.py
"""Non-fatal diagnostics reported while rendering.

Rendering never aborts because of document content. Conditions the output
dialect cannot satisfy (for example a table without body rows) are recorded
as :class:`Diagnostic` entries, logged at WARNING level, and returned to the
caller next to the rendered markup.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from mallardoc.constants import DiagnosticSeverity

if TYPE_CHECKING:
    from mallardoc.ast.nodes import Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic produced during rendering.

    Parameters
    ----------
    code : str
        Stable machine-readable identifier (e.g. ``"table-no-body"``)
    message : str
        Human-readable description
    severity : {"warning", "error"}, default "warning"
        Severity of the condition
    node_id : str or None, default None
        Identifier of the node that triggered the diagnostic, if it has one

    """

    code: str
    message: str
    severity: DiagnosticSeverity = "warning"
    node_id: Optional[str] = None

    def __str__(self) -> str:
        location = f" (node '{self.node_id}')" if self.node_id else ""
        return f"{self.severity}: {self.message}{location}"


class DiagnosticCollector:
    """Accumulates the diagnostics of one render call."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def warn(self, code: str, message: str, node: Optional[Node] = None) -> Diagnostic:
        """Record and log a warning.

        Parameters
        ----------
        code : str
            Diagnostic code
        message : str
            Human-readable message
        node : Node, optional
            Node the warning refers to

        Returns
        -------
        Diagnostic
            The recorded diagnostic

        """
        diagnostic = Diagnostic(code=code, message=message, node_id=node.id if node is not None else None)
        self._diagnostics.append(diagnostic)
        logger.warning(str(diagnostic))
        return diagnostic

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Diagnostics recorded so far, in emission order."""
        return tuple(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)


@dataclass(frozen=True)
class RenderResult:
    """Rendered markup together with the diagnostics it produced."""

    content: str
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def has_warnings(self) -> bool:
        """True when at least one warning was reported."""
        return any(d.severity == "warning" for d in self.diagnostics)
