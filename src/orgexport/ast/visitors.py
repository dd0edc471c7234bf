#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgexport/ast/visitors.py
"""Visitor pattern implementation for attributed-string parts.

The set of part types is closed: NodeVisitor declares one abstract visit_*
method per part class in :mod:`orgexport.ast.nodes`, so a concrete visitor
that forgets a case cannot be instantiated. Anything outside that set,
including :class:`~orgexport.ast.nodes.UnrecognizedPart`, is routed to
``generic_visit``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from orgexport.ast.nodes import (
    BareLink,
    FractionCookie,
    InlineTimestamp,
    Link,
    List,
    PercentageCookie,
    Table,
    Text,
)


class NodeVisitor(ABC):
    """Abstract base class for attributed-string part visitors.

    Examples
    --------
    Visitor that collects link targets:

        >>> class LinkCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.uris = []
        ...
        ...     def visit_link(self, node):
        ...         self.uris.append(node.uri)
        ...
        ...     # remaining visit_* methods return None
        ...
        >>> for part in header.description:
        ...     part.accept(collector)

    """

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text part.

        Parameters
        ----------
        node : Text
            The text part to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link part.

        Parameters
        ----------
        node : Link
            The link part to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_fraction_cookie(self, node: FractionCookie) -> Any:
        """Visit a FractionCookie part."""
        pass

    @abstractmethod
    def visit_percentage_cookie(self, node: PercentageCookie) -> Any:
        """Visit a PercentageCookie part."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table part.

        Parameters
        ----------
        node : Table
            The table to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List part.

        Parameters
        ----------
        node : List
            The list to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_inline_timestamp(self, node: InlineTimestamp) -> Any:
        """Visit an InlineTimestamp part."""
        pass

    @abstractmethod
    def visit_bare_link(self, node: BareLink) -> Any:
        """Visit a BareLink part (url, www-url, e-mail or phone number)."""
        pass

    def generic_visit(self, node: Any) -> Any:
        """Fallback visitor for unrecognized parts.

        Called for :class:`~orgexport.ast.nodes.UnrecognizedPart` and for any
        object that is not one of the known part classes. The default
        implementation does nothing but can be overridden.

        Parameters
        ----------
        node : Any
            The unrecognized part

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None


__all__ = ["NodeVisitor"]
