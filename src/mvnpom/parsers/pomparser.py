# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the parser for POM files.

The XML is parsed with defusedxml and then decoded into a :class:`~mvnpom.pom.model.Project`
by following the XML bindings declared on the model records.
"""

import logging
import os
from collections.abc import Iterator
from dataclasses import fields
from typing import Any, TypeVar
from xml.etree.ElementTree import Element  # nosec B405

import defusedxml.ElementTree
from defusedxml import DefusedXmlException
from defusedxml.ElementTree import fromstring

from mvnpom.config.defaults import defaults
from mvnpom.errors import DecodeError, FileAccessError
from mvnpom.pom.model import XML_BINDING, FieldKind, Project, XmlBinding

logger: logging.Logger = logging.getLogger(__name__)

#: The local name of the root element of a POM file.
POM_ROOT_TAG = "project"

RecordT = TypeVar("RecordT")


def parse_pom_file(pom_path: str | os.PathLike) -> Project:
    """Read and decode the POM file at the passed path.

    Parameters
    ----------
    pom_path : str | os.PathLike
        The path to the POM file.

    Returns
    -------
    Project
        The decoded project.

    Raises
    ------
    FileAccessError
        If the file cannot be opened or read.
    DecodeError
        If the content of the file cannot be decoded into a project.
    """
    try:
        with open(pom_path, "rb") as file:
            content = file.read()
    except OSError as error:
        raise FileAccessError(
            f"Cannot read the POM file {os.fspath(pom_path)}: {error}",
            path=os.fspath(pom_path),
            cause=error,
        ) from error

    logger.debug("Read %s bytes from %s.", len(content), pom_path)
    return parse_pom_string(content)


def parse_pom_string(pom_string: str | bytes) -> Project:
    """Decode the passed POM content into a project.

    Parameters
    ----------
    pom_string : str | bytes
        The contents of a POM file. Bytes are decoded using the encoding declared in the XML prolog.

    Returns
    -------
    Project
        The decoded project.

    Raises
    ------
    DecodeError
        If the content is not well-formed XML, uses forbidden XML constructs, or is not a POM.
    """
    return decode_project(parse_pom_element(pom_string))


def parse_pom_element(pom_string: str | bytes) -> Element:
    """Parse the passed POM content into an XML element tree using defusedxml.

    Parameters
    ----------
    pom_string : str | bytes
        The contents of a POM file.

    Returns
    -------
    Element
        The parsed element representing the POM's XML hierarchy.

    Raises
    ------
    DecodeError
        If the content cannot be parsed.
    """
    try:
        # Stored here first to help with type checking.
        pom: Element = fromstring(
            pom_string,
            forbid_dtd=defaults.get_bool("pomparser", "forbid_dtd", fallback=False),
            forbid_entities=defaults.get_bool("pomparser", "forbid_entities", fallback=True),
            forbid_external=defaults.get_bool("pomparser", "forbid_external", fallback=True),
        )
        return pom
    except (DefusedXmlException, defusedxml.ElementTree.ParseError, LookupError) as error:
        # LookupError: the XML prolog declares an encoding that Python does not know.
        logger.debug("Failed to parse XML: %s", error)
        raise DecodeError(f"Unable to parse the POM content: {error}", cause=error) from error


def decode_project(pom: Element) -> Project:
    """Decode a parsed POM element tree into a project.

    Parameters
    ----------
    pom : Element
        The root element of the POM.

    Returns
    -------
    Project
        The decoded project.

    Raises
    ------
    DecodeError
        If the root element is not ``<project>``.
    """
    root_tag = local_name(pom.tag)
    if root_tag != POM_ROOT_TAG:
        raise DecodeError(f"Expected the root element <{POM_ROOT_TAG}> but found <{root_tag}>.")

    strip_text = defaults.get_bool("pomparser", "strip_text", fallback=True)
    return _decode_record(pom, Project, strip_text)


def local_name(tag: str) -> str:
    """Return the tag name without the namespace, e.g. ``{http://maven.apache.org/POM/4.0.0}version``."""
    return tag.rpartition("}")[2]


def element_text(element: Element, strip: bool = True) -> str:
    """Return the character data directly inside the element, ignoring the text of its children."""
    text = "".join([element.text or ""] + [child.tail or "" for child in element])
    return text.strip() if strip else text


def find_elements(parent: Element, tags: list[str]) -> Iterator[Element]:
    """Yield the elements reached by following the tag path from the parent, in document order.

    Every element matching a tag is followed, so an item is found under any of several
    repeated containers.
    """
    if not tags:
        yield parent
        return

    for child in parent:
        # Handle raw tags, and tags accompanied by Maven metadata enclosed in curly braces. E.g. '{metadata}tag'
        if isinstance(child.tag, str) and local_name(child.tag) == tags[0]:
            yield from find_elements(child, tags[1:])


def decode_property_entries(properties: Element, strip: bool = True) -> list[tuple[str, str]]:
    """Return the ``(tag name, text)`` pairs of all child elements of a ``<properties>`` element.

    Property names are chosen by the POM author, so every child is taken regardless of its tag.
    """
    return [
        (local_name(child.tag), element_text(child, strip)) for child in properties if isinstance(child.tag, str)
    ]


def fold_property_entries(entries: list[tuple[str, str]]) -> dict[str, str]:
    """Fold property entries into a mapping. The last entry wins for duplicated names."""
    properties: dict[str, str] = {}
    for name, value in entries:
        if name in properties:
            logger.debug("Property %s is declared more than once. Using the last value.", name)
        properties[name] = value
    return properties


def _decode_record(element: Element, record_type: type[RecordT], strip_text: bool) -> RecordT:
    """Decode the element into a record by following the XML bindings of the record fields."""
    values: dict[str, Any] = {}
    bound_tags = set()
    for record_field in fields(record_type):  # type: ignore[arg-type]
        binding: XmlBinding | None = record_field.metadata.get(XML_BINDING)
        if binding is None:
            continue
        bound_tags.add(binding.tags[0])
        matches = list(find_elements(element, binding.tags))
        if not matches:
            # Keep the default value of the field.
            continue

        match binding.kind:
            case FieldKind.TEXT:
                values[record_field.name] = element_text(matches[-1], strip_text)
            case FieldKind.RECORD:
                values[record_field.name] = _decode_record(matches[-1], binding.record_type, strip_text)
            case FieldKind.LIST:
                values[record_field.name] = [
                    _decode_record(item, binding.record_type, strip_text) for item in matches
                ]
            case FieldKind.MAPPING:
                entries = []
                for container in matches:
                    entries.extend(decode_property_entries(container, strip_text))
                values[record_field.name] = fold_property_entries(entries)

    for child in element:
        if isinstance(child.tag, str) and local_name(child.tag) not in bound_tags:
            logger.debug("Discarding unmapped element <%s> of <%s>.", local_name(child.tag), local_name(element.tag))

    return record_type(**values)
