#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgexport/ast/serialization.py
"""JSON serialization and deserialization for the document model.

This module is the hand-off point between an Org parser and the renderers: a
parser in any language can emit the JSON form, and :func:`json_to_document`
turns it into the frozen model.

Every record is written as a dict with a ``node_type`` key naming its class.
Optional fields that are None are omitted. Documents carry a
``schema_version`` at the root.

Part types this library does not know are loaded as
:class:`~orgexport.ast.nodes.UnrecognizedPart` (their payload kept in
``data``) unless ``strict_mode`` is set, so a model produced by a newer
parser still renders, with a diagnostic for each unknown part. An
UnrecognizedPart is written back out under its original ``node_type``.

Examples
--------
Serialize a document to JSON:

    >>> from orgexport.ast import Document, Header, TitleLine
    >>> from orgexport.ast.serialization import document_to_json, json_to_document
    >>>
    >>> doc = Document(headers=[Header(nesting_level=1, title_line=TitleLine(raw_title="Inbox"))])
    >>> json_str = document_to_json(doc, indent=2)

Deserialize JSON back to the model:

    >>> json_to_document(json_str) == doc
    True

"""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from typing import Any, Callable

from orgexport.ast.nodes import (
    BareLink,
    ClockEntry,
    Document,
    FractionCookie,
    Header,
    InlineTimestamp,
    Link,
    List,
    ListItem,
    LogBookEntry,
    Node,
    PercentageCookie,
    PlanningItem,
    PropertyListItem,
    RawLogBookEntry,
    Table,
    TableCell,
    TableRow,
    Text,
    Timestamp,
    TitleLine,
    TodoKeywordSet,
    UnrecognizedPart,
)
from orgexport.constants import DEFAULT_BULLET_CHARACTER, DEFAULT_NUMBER_TERMINATOR, SCHEMA_VERSION

logger = logging.getLogger(__name__)


def _serialize_timestamp(node: Timestamp) -> dict[str, Any]:
    """Serialize a Timestamp, omitting unset optional fields."""
    result: dict[str, Any] = {"node_type": "Timestamp"}
    for timestamp_field in fields(node):
        value = getattr(node, timestamp_field.name)
        if value is not None:
            result[timestamp_field.name] = value
    return result


def _serialize_parts(parts: list[Node]) -> list[dict[str, Any]]:
    return [ast_to_dict(part) for part in parts]


def _serialize_link(node: Link) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "Link", "uri": node.uri}
    if node.title is not None:
        result["title"] = node.title
    return result


def _serialize_fraction_cookie(node: FractionCookie) -> dict[str, Any]:
    return {"node_type": "FractionCookie", "numerator": node.numerator, "denominator": node.denominator}


def _serialize_inline_timestamp(node: InlineTimestamp) -> dict[str, Any]:
    result: dict[str, Any] = {
        "node_type": "InlineTimestamp",
        "first_timestamp": ast_to_dict(node.first_timestamp),
    }
    if node.second_timestamp is not None:
        result["second_timestamp"] = ast_to_dict(node.second_timestamp)
    return result


def _serialize_unrecognized_part(node: UnrecognizedPart) -> dict[str, Any]:
    """Write an unknown part back out under its original type name."""
    return {**node.data, "node_type": node.part_type}


def _serialize_list(node: List) -> dict[str, Any]:
    return {
        "node_type": "List",
        "bullet_character": node.bullet_character,
        "is_ordered": node.is_ordered,
        "number_terminator_character": node.number_terminator_character,
        "items": [ast_to_dict(item) for item in node.items],
    }


def _serialize_list_item(node: ListItem) -> dict[str, Any]:
    result: dict[str, Any] = {
        "node_type": "ListItem",
        "title_line": _serialize_parts(node.title_line),
        "contents": _serialize_parts(node.contents),
        "is_checkbox": node.is_checkbox,
        "checkbox_state": node.checkbox_state,
    }
    if node.force_number is not None:
        result["force_number"] = node.force_number
    return result


def _serialize_table(node: Table) -> dict[str, Any]:
    return {"node_type": "Table", "rows": [ast_to_dict(row) for row in node.rows]}


def _serialize_table_row(node: TableRow) -> dict[str, Any]:
    return {"node_type": "TableRow", "cells": [ast_to_dict(cell) for cell in node.cells]}


def _serialize_table_cell(node: TableCell) -> dict[str, Any]:
    return {"node_type": "TableCell", "content": _serialize_parts(node.content), "raw_content": node.raw_content}


def _serialize_title_line(node: TitleLine) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "TitleLine", "raw_title": node.raw_title, "tags": list(node.tags)}
    if node.todo_keyword is not None:
        result["todo_keyword"] = node.todo_keyword
    return result


def _serialize_clock_entry(node: ClockEntry) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "ClockEntry", "start": ast_to_dict(node.start)}
    if node.end is not None:
        result["end"] = ast_to_dict(node.end)
    return result


def _serialize_header(node: Header) -> dict[str, Any]:
    """Serialize a Header with everything it owns."""
    return {
        "node_type": "Header",
        "nesting_level": node.nesting_level,
        "title_line": ast_to_dict(node.title_line),
        "planning_items": [ast_to_dict(item) for item in node.planning_items],
        "property_list_items": [ast_to_dict(item) for item in node.property_list_items],
        "log_book_entries": [ast_to_dict(entry) for entry in node.log_book_entries],
        "raw_description": node.raw_description,
        "description": _serialize_parts(node.description),
    }


def _serialize_document(node: Document) -> dict[str, Any]:
    return {
        "node_type": "Document",
        "headers": [ast_to_dict(header) for header in node.headers],
        "todo_keyword_sets": [ast_to_dict(keyword_set) for keyword_set in node.todo_keyword_sets],
        "file_config_lines": list(node.file_config_lines),
        "lines_before_headings": list(node.lines_before_headings),
    }


# Dispatch table mapping record types to their serialization functions
_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    Timestamp: _serialize_timestamp,
    Text: lambda n: {"node_type": "Text", "content": n.content},
    Link: _serialize_link,
    FractionCookie: _serialize_fraction_cookie,
    PercentageCookie: lambda n: {"node_type": "PercentageCookie", "percentage": n.percentage},
    InlineTimestamp: _serialize_inline_timestamp,
    BareLink: lambda n: {"node_type": "BareLink", "kind": n.kind, "content": n.content},
    UnrecognizedPart: _serialize_unrecognized_part,
    List: _serialize_list,
    ListItem: _serialize_list_item,
    Table: _serialize_table,
    TableRow: _serialize_table_row,
    TableCell: _serialize_table_cell,
    TitleLine: _serialize_title_line,
    PlanningItem: lambda n: {"node_type": "PlanningItem", "kind": n.kind, "timestamp": ast_to_dict(n.timestamp)},
    PropertyListItem: lambda n: {"node_type": "PropertyListItem", "name": n.name, "value": _serialize_parts(n.value)},
    RawLogBookEntry: lambda n: {"node_type": "RawLogBookEntry", "raw": n.raw},
    ClockEntry: _serialize_clock_entry,
    Header: _serialize_header,
    TodoKeywordSet: lambda n: {
        "node_type": "TodoKeywordSet",
        "keywords": list(n.keywords),
        "config_line": n.config_line,
        "default": n.default,
    },
    Document: _serialize_document,
}


def ast_to_dict(node: Any) -> dict[str, Any]:
    """Convert a model record to a dictionary representation.

    Parameters
    ----------
    node : Any
        Any record from :mod:`orgexport.ast.nodes`

    Returns
    -------
    dict
        Dictionary representation of the record

    Raises
    ------
    ValueError
        If ``node`` is not a model record

    Examples
    --------
    >>> from orgexport.ast import Link
    >>> ast_to_dict(Link(uri="https://orgmode.org"))
    {'node_type': 'Link', 'uri': 'https://orgmode.org'}

    """
    node_class = type(node)
    serializer = _SERIALIZATION_DISPATCH.get(node_class)
    if serializer:
        return serializer(node)

    raise ValueError(f"Unknown node type for serialization: {node_class.__name__}")


# Helper functions for deserialization
def _deserialize_parts(parts_data: list[dict[str, Any]], strict_mode: bool) -> list[Node]:
    """Recursively deserialize an attributed string."""
    return [dict_to_ast(part, strict_mode=strict_mode) for part in parts_data]


def _deserialize_optional_timestamp(data: dict[str, Any] | None, strict_mode: bool) -> Timestamp | None:
    if data is None:
        return None
    return _deserialize_timestamp(data, strict_mode)


def _deserialize_timestamp(data: dict[str, Any], strict_mode: bool) -> Timestamp:
    timestamp_fields = {timestamp_field.name for timestamp_field in fields(Timestamp)}
    unknown = [key for key in data if key != "node_type" and key not in timestamp_fields]
    if unknown:
        if strict_mode:
            raise ValueError(f"Unknown Timestamp attributes: {unknown}")
        logger.warning(f"Ignoring unknown Timestamp attributes: {unknown}")
    return Timestamp(**{key: value for key, value in data.items() if key in timestamp_fields})


def _deserialize_text(data: dict[str, Any], strict_mode: bool) -> Text:
    return Text(content=data["content"])


def _deserialize_link(data: dict[str, Any], strict_mode: bool) -> Link:
    return Link(uri=data["uri"], title=data.get("title"))


def _deserialize_fraction_cookie(data: dict[str, Any], strict_mode: bool) -> FractionCookie:
    return FractionCookie(numerator=data.get("numerator"), denominator=data.get("denominator"))


def _deserialize_percentage_cookie(data: dict[str, Any], strict_mode: bool) -> PercentageCookie:
    return PercentageCookie(percentage=data.get("percentage"))


def _deserialize_inline_timestamp(data: dict[str, Any], strict_mode: bool) -> InlineTimestamp:
    return InlineTimestamp(
        first_timestamp=_deserialize_timestamp(data["first_timestamp"], strict_mode),
        second_timestamp=_deserialize_optional_timestamp(data.get("second_timestamp"), strict_mode),
    )


def _deserialize_bare_link(data: dict[str, Any], strict_mode: bool) -> BareLink:
    return BareLink(kind=data["kind"], content=data["content"])


def _deserialize_list(data: dict[str, Any], strict_mode: bool) -> List:
    return List(
        items=[_deserialize_list_item(item, strict_mode) for item in data.get("items", [])],
        bullet_character=data.get("bullet_character", DEFAULT_BULLET_CHARACTER),
        is_ordered=data.get("is_ordered", False),
        number_terminator_character=data.get("number_terminator_character", DEFAULT_NUMBER_TERMINATOR),
    )


def _deserialize_list_item(data: dict[str, Any], strict_mode: bool) -> ListItem:
    return ListItem(
        title_line=_deserialize_parts(data.get("title_line", []), strict_mode),
        contents=_deserialize_parts(data.get("contents", []), strict_mode),
        is_checkbox=data.get("is_checkbox", False),
        checkbox_state=data.get("checkbox_state", "unchecked"),
        force_number=data.get("force_number"),
    )


def _deserialize_table(data: dict[str, Any], strict_mode: bool) -> Table:
    return Table(rows=[_deserialize_table_row(row, strict_mode) for row in data.get("rows", [])])


def _deserialize_table_row(data: dict[str, Any], strict_mode: bool) -> TableRow:
    return TableRow(cells=[_deserialize_table_cell(cell, strict_mode) for cell in data.get("cells", [])])


def _deserialize_table_cell(data: dict[str, Any], strict_mode: bool) -> TableCell:
    return TableCell(
        content=_deserialize_parts(data.get("content", []), strict_mode),
        raw_content=data.get("raw_content", ""),
    )


def _deserialize_title_line(data: dict[str, Any], strict_mode: bool) -> TitleLine:
    return TitleLine(
        raw_title=data["raw_title"],
        todo_keyword=data.get("todo_keyword"),
        tags=list(data.get("tags", [])),
    )


def _deserialize_planning_item(data: dict[str, Any], strict_mode: bool) -> PlanningItem:
    return PlanningItem(kind=data["kind"], timestamp=_deserialize_timestamp(data["timestamp"], strict_mode))


def _deserialize_property_list_item(data: dict[str, Any], strict_mode: bool) -> PropertyListItem:
    return PropertyListItem(name=data["name"], value=_deserialize_parts(data.get("value", []), strict_mode))


def _deserialize_raw_log_book_entry(data: dict[str, Any], strict_mode: bool) -> RawLogBookEntry:
    return RawLogBookEntry(raw=data.get("raw", ""))


def _deserialize_clock_entry(data: dict[str, Any], strict_mode: bool) -> ClockEntry:
    return ClockEntry(
        start=_deserialize_timestamp(data["start"], strict_mode),
        end=_deserialize_optional_timestamp(data.get("end"), strict_mode),
    )


def _deserialize_log_book_entry(data: dict[str, Any], strict_mode: bool) -> LogBookEntry:
    """Deserialize a logbook line; only raw lines and CLOCK entries are valid here."""
    if data.get("node_type") == "ClockEntry":
        return _deserialize_clock_entry(data, strict_mode)
    if data.get("node_type") == "RawLogBookEntry":
        return _deserialize_raw_log_book_entry(data, strict_mode)
    raise ValueError(f"Unknown logbook entry type: {data.get('node_type')}")


def _deserialize_header(data: dict[str, Any], strict_mode: bool) -> Header:
    return Header(
        nesting_level=data["nesting_level"],
        title_line=_deserialize_title_line(data["title_line"], strict_mode),
        planning_items=[_deserialize_planning_item(item, strict_mode) for item in data.get("planning_items", [])],
        property_list_items=[
            _deserialize_property_list_item(item, strict_mode) for item in data.get("property_list_items", [])
        ],
        log_book_entries=[_deserialize_log_book_entry(entry, strict_mode) for entry in data.get("log_book_entries", [])],
        raw_description=data.get("raw_description", ""),
        description=_deserialize_parts(data.get("description", []), strict_mode),
    )


def _deserialize_todo_keyword_set(data: dict[str, Any], strict_mode: bool) -> TodoKeywordSet:
    return TodoKeywordSet(
        keywords=list(data.get("keywords", [])),
        config_line=data.get("config_line", ""),
        default=data.get("default", False),
    )


def _deserialize_document(data: dict[str, Any], strict_mode: bool) -> Document:
    return Document(
        headers=[_deserialize_header(header, strict_mode) for header in data.get("headers", [])],
        todo_keyword_sets=[
            _deserialize_todo_keyword_set(keyword_set, strict_mode) for keyword_set in data.get("todo_keyword_sets", [])
        ],
        file_config_lines=list(data.get("file_config_lines", [])),
        lines_before_headings=list(data.get("lines_before_headings", [])),
    )


# Dispatch table mapping node type strings to deserializer functions
_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any], bool], Any]] = {
    "Timestamp": _deserialize_timestamp,
    "Text": _deserialize_text,
    "Link": _deserialize_link,
    "FractionCookie": _deserialize_fraction_cookie,
    "PercentageCookie": _deserialize_percentage_cookie,
    "InlineTimestamp": _deserialize_inline_timestamp,
    "BareLink": _deserialize_bare_link,
    "List": _deserialize_list,
    "ListItem": _deserialize_list_item,
    "Table": _deserialize_table,
    "TableRow": _deserialize_table_row,
    "TableCell": _deserialize_table_cell,
    "TitleLine": _deserialize_title_line,
    "PlanningItem": _deserialize_planning_item,
    "PropertyListItem": _deserialize_property_list_item,
    "RawLogBookEntry": _deserialize_raw_log_book_entry,
    "ClockEntry": _deserialize_clock_entry,
    "Header": _deserialize_header,
    "TodoKeywordSet": _deserialize_todo_keyword_set,
    "Document": _deserialize_document,
}


def dict_to_ast(data: dict[str, Any], strict_mode: bool = False) -> Any:
    """Convert a dictionary representation back to a model record.

    Parameters
    ----------
    data : dict
        Dictionary representation of a record
    strict_mode : bool, default False
        If True, raise ValueError on unknown node types.
        If False, load them as UnrecognizedPart (useful for forward compatibility).

    Returns
    -------
    Any
        Reconstructed model record

    Raises
    ------
    ValueError
        If the dictionary has no ``node_type``, or an unknown one and
        strict_mode is True
    ValidationError
        If the reconstructed record is structurally invalid

    Examples
    --------
    >>> node = dict_to_ast({"node_type": "Text", "content": "Hello"})
    >>> print(node.content)
    Hello
    >>> dict_to_ast({"node_type": "InlineMarkup", "content": "*bold*"})
    UnrecognizedPart(part_type='InlineMarkup', data={'content': '*bold*'})

    """
    node_type = data.get("node_type")
    if not node_type:
        raise ValueError("Dictionary must contain 'node_type' field")

    deserializer = _DESERIALIZATION_DISPATCH.get(node_type)
    if not deserializer:
        if strict_mode:
            raise ValueError(f"Unknown node type: {node_type}")
        logger.debug(f"Loading unknown node type '{node_type}' as UnrecognizedPart")
        return UnrecognizedPart(
            part_type=node_type,
            data={key: value for key, value in data.items() if key != "node_type"},
        )

    return deserializer(data, strict_mode)


def document_to_dict(document: Document) -> dict[str, Any]:
    """Convert a Document to a versioned dictionary.

    Parameters
    ----------
    document : Document
        Document to convert

    Returns
    -------
    dict
        ``{"schema_version": 1, "node_type": "Document", ...}``

    """
    return {"schema_version": SCHEMA_VERSION, **ast_to_dict(document)}


def dict_to_document(data: dict[str, Any], validate_schema: bool = True, strict_mode: bool = False) -> Document:
    """Convert a versioned dictionary back to a Document.

    Parameters
    ----------
    data : dict
        Dictionary produced by :func:`document_to_dict` or by a parser
    validate_schema : bool, default True
        If True, raise on an unsupported schema version. A missing version
        is read as version 1.
    strict_mode : bool, default False
        If True, raise ValueError on unknown node types

    Returns
    -------
    Document
        Reconstructed document

    Raises
    ------
    ValueError
        If the schema version is unsupported, the root is not a Document, or
        strict_mode is set and an unknown node type is found

    """
    data = dict(data)
    schema_version = data.pop("schema_version", None)

    if validate_schema:
        if schema_version is None:
            # Backward compatibility: if no version specified, assume version 1
            schema_version = SCHEMA_VERSION
        if not isinstance(schema_version, int):
            raise ValueError(f"Schema version must be an integer, got {type(schema_version).__name__}")
        elif schema_version != SCHEMA_VERSION:
            raise ValueError(
                f"Unsupported schema version: {schema_version}. "
                f"This version of orgexport supports schema version {SCHEMA_VERSION} only."
            )
    elif schema_version is not None and schema_version != SCHEMA_VERSION:
        logger.warning(
            f"Schema version {schema_version} differs from supported version {SCHEMA_VERSION}. "
            f"Attempting to load anyway (schema validation disabled)."
        )

    if data.get("node_type") != "Document":
        raise ValueError(f"Expected a Document at the root, got {data.get('node_type')!r}")

    return _deserialize_document(data, strict_mode)


def document_to_json(document: Document, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string with schema versioning.

    Parameters
    ----------
    document : Document
        Document to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON text; non-ASCII characters are written as-is

    """
    return json.dumps(document_to_dict(document), indent=indent, ensure_ascii=False)


def json_to_document(json_str: str, validate_schema: bool = True, strict_mode: bool = False) -> Document:
    """Deserialize a JSON string to a Document.

    Parameters
    ----------
    json_str : str
        JSON text
    validate_schema : bool, default True
        If True, raise on an unsupported schema version
    strict_mode : bool, default False
        If True, raise ValueError on unknown node types

    Returns
    -------
    Document
        Reconstructed document

    Raises
    ------
    ValueError
        See :func:`dict_to_document`
    json.JSONDecodeError
        If the JSON text is malformed

    """
    return dict_to_document(json.loads(json_str), validate_schema=validate_schema, strict_mode=strict_mode)


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "dict_to_document",
    "document_to_dict",
    "document_to_json",
    "json_to_document",
]
