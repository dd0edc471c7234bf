#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgexport/renderers/base.py
"""Base classes for the Org renderers.

This module defines the abstract base class that every renderer inherits
from. It provides the shared option handling and the diagnostic channel used
to report input that cannot be rendered.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from orgexport.diagnostics import DiagnosticCallback, DiagnosticEvent
from orgexport.exceptions import InvalidOptionsError
from orgexport.options.base import BaseRendererOptions

logger = logging.getLogger(__name__)


class BaseRenderer(ABC):
    """Abstract base class for all renderers.

    Every renderer turns one kind of model record into Org text through
    ``render()``. Renderers hold only configuration and collaborators, so a
    single instance can be reused across documents and threads.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Rendering options
    diagnostic_callback : DiagnosticCallback or None, default = None
        Receives a DiagnosticEvent whenever input is replaced by empty text.
        When None, the event is logged as a warning instead.

    Examples
    --------
    Creating a custom renderer:

        >>> from orgexport.renderers.base import BaseRenderer
        >>>
        >>> class TagRenderer(BaseRenderer):
        ...     def render(self, tags):
        ...         return ":" + ":".join(tags) + ":"

    """

    def __init__(
        self,
        options: BaseRendererOptions | None = None,
        diagnostic_callback: Optional[DiagnosticCallback] = None,
    ):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Rendering options.
        diagnostic_callback : DiagnosticCallback or None, default = None
            Callback for diagnostic events.

        """
        self.options = options
        self.diagnostic_callback = diagnostic_callback

    @abstractmethod
    def render(self, node: Any) -> str:
        """Render a model record to Org text.

        Parameters
        ----------
        node : Any
            The record to render

        Returns
        -------
        str
            Org-Mode text

        """
        pass

    def _emit_diagnostic(self, event_type: str, message: str, **metadata: Any) -> None:
        """Report a diagnostic to the callback, or log it when none is registered.

        Parameters
        ----------
        event_type : str
            Type of diagnostic event (see DiagnosticEvent)
        message : str
            Human-readable description of the event
        **metadata
            Additional event-specific information

        Notes
        -----
        If the callback raises an exception, it will be caught and logged to
        prevent interrupting the render.

        """
        if not self.diagnostic_callback:
            logger.warning(message)
            return

        try:
            event = DiagnosticEvent(
                event_type=event_type,  # type: ignore[arg-type]
                message=message,
                metadata=metadata,
            )
            self.diagnostic_callback(event)
        except Exception as e:
            logger.warning(f"Diagnostic callback raised exception: {e}", exc_info=True)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
