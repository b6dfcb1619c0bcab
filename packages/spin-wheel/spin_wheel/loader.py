"""Options loader protocol and file/URL implementations.

Supported formats:

XML::

    <wheel>
      <option label="Pizza" color="#FF6B6B">Pizza night</option>
      <option label="Tacos" />
    </wheel>

JSON, either a list of records or an object with an ``options`` list::

    {"options": [{"label": "Pizza", "text": "Pizza night", "color": "#FF6B6B"}]}
"""
from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Iterable, Mapping, Protocol, runtime_checkable

from spin_wheel.colors import resolve_color
from spin_wheel.types import OptionsLoadError, Option

logger = logging.getLogger(__name__)

_FETCH_TIMEOUT = 10.0
_OPTION_TAGS = ("option", "opcion")


@runtime_checkable
class OptionsLoader(Protocol):
    """Protocol for anything that can produce the wheel's options.

    Implementations raise ``OptionsLoadError`` when the source cannot be
    read or parsed. An empty result is returned as-is; rejecting it is the
    wheel's job.
    """

    def load(self) -> list[Option]:
        """Read the source and return the options in wheel order."""
        ...


def build_options(records: Iterable[Mapping[str, Any]]) -> list[Option]:
    """Turn raw ``{label, text, color}`` records into Options with defaults."""
    options = []
    for index, record in enumerate(records):
        label = _text(record.get("label")) or f"Option {index + 1}"
        text = _text(record.get("text", record.get("display_text"))) or label
        color = resolve_color(record.get("color"), index)
        options.append(Option(label=label, display_text=text, color=color))
    return options


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_xml(text: str | bytes) -> list[Option]:
    """Parse ``<option>`` elements; bytes are decoded per the XML declaration.

    Older data files spell the element ``<opcion nombre="...">``; both
    spellings are read.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise OptionsLoadError(f"Malformed XML: {exc}") from exc
    records = [
        {
            "label": elem.get("label", elem.get("nombre")),
            "text": "".join(elem.itertext()),
            "color": elem.get("color"),
        }
        for elem in root.iter()
        if elem.tag in _OPTION_TAGS
    ]
    return build_options(records)


def parse_json(text: str) -> list[Option]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise OptionsLoadError(f"Malformed JSON: {exc}") from exc
    if isinstance(data, dict):
        data = data.get("options", [])
    if not isinstance(data, list):
        raise OptionsLoadError("JSON options must be a list of records")
    records = []
    for index, item in enumerate(data):
        if isinstance(item, str):
            records.append({"label": item})
        elif isinstance(item, dict):
            records.append(item)
        else:
            raise OptionsLoadError(
                f"Option {index + 1} must be an object or string, got {type(item).__name__}"
            )
    return build_options(records)


def read_bytes(source: str | Path) -> bytes:
    """Return the raw bytes of a local file or an ``http(s)://`` URL."""
    source_str = str(source)
    if source_str.startswith(("http://", "https://")):
        try:
            with urllib.request.urlopen(source_str, timeout=_FETCH_TIMEOUT) as resp:
                return resp.read()
        except urllib.error.HTTPError as exc:
            raise OptionsLoadError(f"HTTP error {exc.code} fetching {source_str}") from exc
        except urllib.error.URLError as exc:
            raise OptionsLoadError(f"Cannot reach {source_str}: {exc.reason}") from exc
    try:
        return Path(source).read_bytes()
    except OSError as exc:
        raise OptionsLoadError(f"Cannot read {source_str}: {exc}") from exc


def read_source(source: str | Path) -> str:
    """Return the UTF-8 text of a local file or an ``http(s)://`` URL."""
    data = read_bytes(source)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise OptionsLoadError(f"{source} is not valid UTF-8: {exc}") from exc


class XmlOptionsLoader:
    """Loads ``<option>`` elements from an XML file or URL."""

    def __init__(self, source: str | Path) -> None:
        self.source = source

    def load(self) -> list[Option]:
        options = parse_xml(read_bytes(self.source))
        logger.info("Read %d options from %s", len(options), self.source)
        return options


class JsonOptionsLoader:
    """Loads option records from a JSON file or URL."""

    def __init__(self, source: str | Path) -> None:
        self.source = source

    def load(self) -> list[Option]:
        options = parse_json(read_source(self.source))
        logger.info("Read %d options from %s", len(options), self.source)
        return options


class StaticOptionsLoader:
    """Serves a fixed list of records, e.g. options embedded in config."""

    def __init__(self, records: Iterable[Mapping[str, Any] | str]) -> None:
        self._records = [
            {"label": r} if isinstance(r, str) else dict(r) for r in records
        ]

    def load(self) -> list[Option]:
        return build_options(self._records)


def loader_for(source: str | Path) -> OptionsLoader:
    """Pick a loader from the source's suffix (``.xml`` or ``.json``)."""
    name = str(source).split("?", 1)[0].lower()
    if name.endswith(".xml"):
        return XmlOptionsLoader(source)
    if name.endswith(".json"):
        return JsonOptionsLoader(source)
    raise OptionsLoadError(f"Unsupported options format: {source}")
