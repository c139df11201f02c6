from .errors import (
    CircularReferenceError,
    ConfigError,
    ConflictingDefinitionError,
    DocumentNotFoundError,
    DuplicateKeyError,
    ErrorKind,
    ImmutableCollectionError,
    KeyNotFoundError,
    MalformedDocumentError,
)
from .key_store import KeyStore
from .loader import ConfigLoader, load
from .resolver import Resolver
from .settings import ToolSettings, UnsupportedPlatformError, load_settings
from .tree import ConfigNode, TreeReader, XmlTreeReader

__doc__ = """This module loads config documents into a flat, read-only key store.

A config document is an XML file with a `configuration` root element holding `add` entries:
* `<add key="name" value="..." />` or `<add key="name">...</add>` define a single value,
* `<add key="name" nested="true"><configuration>...</configuration></add>` define a nested configuration whose keys
  are prefixed with `name/`.

The root element may reference a `parent` document. All settings of the parent (and its own parents) are inherited
and may be overridden by the referencing document. Parent references are resolved relative to the directory of the
document being loaded and the `.config` suffix may be omitted. Defining the same key twice within one document
(or one nested configuration) is an error, as is a parent chain that revisits a document."""
