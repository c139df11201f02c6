from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Set, Tuple

from confchain.core import get_logger
from confchain.utils import canonical_path, ensure_suffix, to_os_path

from .errors import (
    CircularReferenceError,
    ConflictingDefinitionError,
    DuplicateKeyError,
    MalformedDocumentError,
)
from .tree import ConfigNode, TreeReader, read_document

logger = get_logger(__name__)

ROOT_TAG = "configuration"
ENTRY_TAG = "add"
PARENT_ATTRIBUTE = "parent"
KEY_ATTRIBUTE = "key"
VALUE_ATTRIBUTE = "value"
NESTED_ATTRIBUTE = "nested"
DEFAULT_SUFFIX = ".config"


class Resolver:
    """
    Flattens a `configuration` tree into a single key -> value mapping, following `parent`
    references and qualifying the keys of nested configurations with the key of their entry.

    The chain of documents visited so far is passed explicitly into each call as an immutable
    tuple, its first item being the top-level document of the load.
    """

    reader: TreeReader
    suffix: str
    encoding: str

    def __init__(
        self,
        reader: TreeReader,
        *,
        suffix: str = DEFAULT_SUFFIX,
        encoding: str = "utf-8",
    ):
        self.reader = reader
        self.suffix = suffix
        self.encoding = encoding

    def resolve_file(self, path: Path, visited: Tuple[Path, ...]) -> Dict[str, str]:
        node = read_document(path, self.reader, encoding=self.encoding)
        return self.resolve(node, True, visited, source=path)

    def resolve(
        self,
        node: ConfigNode,
        parent_allowed: bool,
        visited: Tuple[Path, ...],
        *,
        source: Optional[Path] = None,
    ) -> Dict[str, str]:
        if node.tag != ROOT_TAG:
            raise MalformedDocumentError(
                f"Config must be encapsulated by a '{ROOT_TAG}' tag", path=source
            )

        parent = node.attribute(PARENT_ATTRIBUTE)
        if parent_allowed and parent is not None:
            result = self._resolve_parent(parent, visited)
        else:
            result = {}

        scope_keys: Set[str] = set()
        for entry in node.children:
            if entry.tag != ENTRY_TAG:
                raise MalformedDocumentError(
                    f"All entries must be '{ENTRY_TAG}' tags, found '{entry.tag}'",
                    path=source,
                )

            key = entry.attribute(KEY_ATTRIBUTE)
            if key is None:
                raise MalformedDocumentError(
                    f"Entry does not specify the '{KEY_ATTRIBUTE}' attribute",
                    path=source,
                )

            value = entry.attribute(VALUE_ATTRIBUTE)
            nested = _is_nested(entry)

            if value is not None and nested:
                raise ConflictingDefinitionError(
                    f"Cannot specify both '{VALUE_ATTRIBUTE}' and '{NESTED_ATTRIBUTE}' for key '{key}'",
                    path=source,
                )
            elif nested:
                if len(entry.children) != 1:
                    raise MalformedDocumentError(
                        f"Must supply exactly one child configuration when '{NESTED_ATTRIBUTE}' is specified (key '{key}')",
                        path=source,
                    )
                # nested blocks never follow parent references
                nested_data = self.resolve(entry.children[0], False, (), source=source)
                for sub_key, sub_value in nested_data.items():
                    self._merge(
                        result, scope_keys, f"{key}/{sub_key}", sub_value, source
                    )
                continue
            elif value is None:
                text = entry.text
                if text is None or not text.strip():
                    raise MalformedDocumentError(
                        f"Entry '{key}' does not specify a value", path=source
                    )
                value = text

            self._merge(result, scope_keys, key, value, source)

        return result

    def _resolve_parent(self, parent: str, visited: Tuple[Path, ...]) -> Dict[str, str]:
        if not visited:
            raise MalformedDocumentError(
                f"Cannot resolve parent '{parent}' without a top-level document"
            )

        # parent references are relative to the top-level document, not to the referencing one
        parent_path = visited[0].parent / ensure_suffix(to_os_path(parent), self.suffix)
        parent_canonical = canonical_path(parent_path)
        if parent_canonical in visited:
            raise CircularReferenceError(visited, parent_canonical)

        logger.debug(f"Loading parent config '{parent_canonical}'")
        return self.resolve_file(parent_canonical, visited + (parent_canonical,))

    @staticmethod
    def _merge(
        result: Dict[str, str],
        scope_keys: Set[str],
        key: str,
        value: str,
        source: Optional[Path],
    ) -> None:
        if key in result:
            if key in scope_keys:
                raise DuplicateKeyError(key, path=source)
            logger.debug(f"Overriding inherited value of '{key}'")
        scope_keys.add(key)
        result[key] = value


def _is_nested(entry: ConfigNode) -> bool:
    return entry.attribute(NESTED_ATTRIBUTE) == "true"
