from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator
from typing_extensions import Protocol

from confchain.core import get_logger

from .errors import DocumentNotFoundError, MalformedDocumentError

logger = get_logger(__name__)

BOM = "\ufeff"


class ConfigNode(BaseModel):
    """
    Immutable document element. Attributes are kept as ordered `(name, value)` pairs so that
    the whole tree, including its attributes, is hashable.
    """

    model_config = ConfigDict(frozen=True)

    tag: str
    attributes: Tuple[Tuple[str, str], ...] = ()
    children: Tuple["ConfigNode", ...] = ()
    text: Optional[str] = None
    """Concatenated text content of this element and all of its descendants."""

    @field_validator("attributes", mode="before")
    @classmethod
    def _attributes_from_mapping(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return tuple(v.items())
        return v

    def attribute(self, name: str) -> Optional[str]:
        for attribute_name, value in self.attributes:
            if attribute_name == name:
                return value
        return None


ConfigNode.model_rebuild()


class TreeReader(Protocol):
    """
    Anything able to turn a document text into a `ConfigNode` tree.
    Implementations raise `MalformedDocumentError` for text that is not structurally well-formed.
    """

    def parse(self, text: str, *, source: Optional[Path] = None) -> ConfigNode:
        ...


def _local_name(tag: str) -> str:
    # ElementTree encodes namespaced tags as `{uri}local`
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def _convert(element: ET.Element) -> ConfigNode:
    text = "".join(element.itertext())
    return ConfigNode(
        tag=_local_name(element.tag),
        attributes={_local_name(k): v for k, v in element.attrib.items()},
        children=tuple(_convert(child) for child in element),
        text=text if text else None,
    )


class XmlTreeReader:
    def parse(self, text: str, *, source: Optional[Path] = None) -> ConfigNode:
        try:
            root = ET.fromstring(strip_bom(text))
        except ET.ParseError as e:
            raise MalformedDocumentError(
                f"Document is not well-formed XML: {e}", path=source
            ) from None
        return _convert(root)


def strip_bom(text: str) -> str:
    while text.startswith(BOM):
        text = text[len(BOM) :]
    return text


def read_document(
    path: Path, reader: TreeReader, *, encoding: str = "utf-8"
) -> ConfigNode:
    """
    Read and parse a single config document. The file is closed before the tree is returned.
    """
    logger.debug(f"Reading config document '{path}'")
    try:
        with path.open("r", encoding=encoding) as f:
            text = f.read()
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
        raise DocumentNotFoundError(
            "Config document does not exist", path=path
        ) from None
    except UnicodeDecodeError as e:
        raise MalformedDocumentError(
            f"Config document is not valid {encoding}: {e.reason}", path=path
        ) from None
    except OSError as e:
        raise DocumentNotFoundError(
            f"Config document cannot be read: {e.strerror}", path=path
        ) from None
    return reader.parse(text, source=path)
