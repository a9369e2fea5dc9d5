"""Shared XML helpers for declaration file parsers."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from nugetsentinel.exceptions import ManifestParseError


def load_document(file_path: Path, content: bytes | str) -> ET.Element:
    """Parse *content* and return the root element.

    Raises :class:`ManifestParseError` when the document is not well-formed.
    """
    try:
        return ET.fromstring(content)
    except ET.ParseError as exc:
        raise ManifestParseError(file_path, str(exc)) from exc


def default_namespace(root: ET.Element) -> str:
    """Return the ``{uri}`` prefix of the root's namespace, or ``""``."""
    if root.tag.startswith("{"):
        return root.tag[: root.tag.index("}") + 1]
    return ""


def clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None
