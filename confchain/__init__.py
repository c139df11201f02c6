from .config import (
    ConfigError,
    ConfigLoader,
    ErrorKind,
    KeyStore,
    load,
)
