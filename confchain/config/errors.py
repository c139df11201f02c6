from pathlib import Path
from typing import Optional, Tuple

from confchain.utils import StrEnum


class ErrorKind(StrEnum):
    MALFORMED_DOCUMENT = "MalformedDocument"
    CONFLICTING_DEFINITION = "ConflictingDefinition"
    DUPLICATE_KEY = "DuplicateKey"
    CIRCULAR_REFERENCE = "CircularReference"
    KEY_NOT_FOUND = "KeyNotFound"
    IMMUTABLE_COLLECTION = "ImmutableCollection"
    DOCUMENT_NOT_FOUND = "DocumentNotFound"


class ConfigError(Exception):
    """
    Base class of all errors raised while loading config documents or reading resolved values.
    The `kind` attribute identifies the failure so that callers may match on it instead of
    catching individual subclasses.
    """

    kind: ErrorKind
    path: Optional[Path]

    def __init__(self, message: str, *, path: Optional[Path] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} (in '{self.path}')"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, path={self.path!r})"


class MalformedDocumentError(ConfigError):
    """
    Wrong root or entry tag, missing key or value, or a nested entry without exactly one child configuration.
    """

    kind = ErrorKind.MALFORMED_DOCUMENT


class ConflictingDefinitionError(ConfigError):
    """
    An entry specifies both an explicit value and the nesting flag.
    """

    kind = ErrorKind.CONFLICTING_DEFINITION


class DuplicateKeyError(ConfigError):
    """
    The same key is defined twice within one document or nested block.
    """

    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, key: str, *, path: Optional[Path] = None):
        super().__init__(
            f"Unable to specify the same key twice (unless overriding parent value): '{key}'",
            path=path,
        )
        self.key = key


class CircularReferenceError(ConfigError):
    """
    A parent chain revisits a document that is already part of the chain.
    """

    kind = ErrorKind.CIRCULAR_REFERENCE

    def __init__(self, chain: Tuple[Path, ...], repeated: Path):
        cycle = " -> ".join(str(p) for p in chain + (repeated,))
        super().__init__(f"Circular config structure detected: {cycle}", path=repeated)
        self.chain = chain


class DocumentNotFoundError(ConfigError):
    kind = ErrorKind.DOCUMENT_NOT_FOUND


class KeyNotFoundError(ConfigError, KeyError):
    kind = ErrorKind.KEY_NOT_FOUND

    def __init__(self, key: str, description: Optional[str] = None):
        if description is None:
            message = f"There was no value specified for '{key}'"
        else:
            message = f"Please specify {description} ('{key}')"
        super().__init__(message)
        self.key = key
        self.description = description


class ImmutableCollectionError(ConfigError, TypeError):
    kind = ErrorKind.IMMUTABLE_COLLECTION

    def __init__(self, message: str = "Collection is read-only"):
        super().__init__(message)
