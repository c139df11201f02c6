from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from confchain.core import get_logger
from confchain.utils import canonical_path, ensure_suffix

from .errors import ConfigError
from .key_store import KeyStore
from .resolver import Resolver
from .settings import ToolSettings, load_settings
from .tree import TreeReader, XmlTreeReader

logger = get_logger(__name__)


class ConfigLoader:
    """
    Entry point for loading config documents. Each `load` call is independent of the others,
    so a single loader may be reused for any number of documents.
    """

    __resolver: Resolver
    __suffix: str
    __search_paths: Tuple[Path, ...]

    def __init__(
        self,
        *,
        settings: Optional[ToolSettings] = None,
        reader: Optional[TreeReader] = None,
    ):
        if settings is None:
            settings = ToolSettings()
        if reader is None:
            reader = XmlTreeReader()

        self.__suffix = settings.suffix
        self.__search_paths = settings.search_paths
        self.__resolver = Resolver(
            reader, suffix=settings.suffix, encoding=settings.encoding
        )

    @classmethod
    def from_settings_file(
        cls, path: Optional[Union[str, Path]] = None
    ) -> "ConfigLoader":
        """
        Args:
            path: Path to the settings file; the default settings file is used if not provided.

        Returns:
            Loader configured from the settings file.
        """
        return cls(settings=load_settings(path))

    @property
    def suffix(self) -> str:
        return self.__suffix

    @property
    def search_paths(self) -> Tuple[Path, ...]:
        return self.__search_paths

    def locate(self, document_ref: Union[str, Path]) -> Path:
        """
        Args:
            document_ref: Path to a config document, with or without the standard suffix.

        Returns:
            Canonical path of the document. The reference is taken relative to the current working
            directory first, then relative to each of the search paths. If none of the candidates exists,
            the canonical form of the reference itself is returned.
        """
        path = Path(ensure_suffix(str(document_ref), self.__suffix))
        for candidate in self._candidates(path):
            if candidate.is_file():
                return canonical_path(candidate)
        return canonical_path(path)

    def _candidates(self, path: Path) -> Iterable[Path]:
        yield path
        if not path.is_absolute():
            for search_path in self.__search_paths:
                yield search_path / path

    def load(self, document_ref: Union[str, Path]) -> KeyStore:
        """
        Load the config document including its whole parent chain.

        Raises:
            ConfigError: If any document of the chain cannot be read or is malformed, or the chain is circular.
        """
        path = self.locate(document_ref)
        logger.debug(f"Loading config '{path}'")
        return KeyStore(self.__resolver.resolve_file(path, (path,)))

    def loads(self, text: str, base_path: Union[str, Path]) -> KeyStore:
        """
        Load a config document given as text. `base_path` stands in for the path of the document;
        parent references are resolved relative to its directory.
        """
        path = canonical_path(base_path)
        node = self.__resolver.reader.parse(text, source=path)
        return KeyStore(self.__resolver.resolve(node, True, (path,), source=path))

    def try_load(self, document_ref: Union[str, Path]) -> Union[KeyStore, ConfigError]:
        """
        Same as `load`, but returns the error instead of raising it.
        """
        try:
            return self.load(document_ref)
        except ConfigError as e:
            return e


def load(document_ref: Union[str, Path]) -> KeyStore:
    """
    Load the config document using a loader configured from the default settings file.
    """
    return ConfigLoader.from_settings_file().load(document_ref)
