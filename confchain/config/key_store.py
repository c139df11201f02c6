from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional, Tuple

from .errors import ImmutableCollectionError, KeyNotFoundError

SEPARATOR = "/"


def join_key(*segments: str) -> str:
    return SEPARATOR.join(segments)


class KeyStore(Mapping):
    """
    Read-only, sorted view of resolved config values. Keys are `/`-joined paths; accessors
    accept the individual path segments and join them.

    Note that `get` takes path segments and raises on a miss, unlike `Mapping.get(key, default)`:
    `store.get("logo", "x.png")` looks up `logo/x.png`. Use `get_or_default` for a fallback value.
    """

    __slots__ = ("_data", "_keys")

    _data: Dict[str, str]
    _keys: Tuple[str, ...]

    def __init__(self, data: Optional[Mapping] = None):
        items = dict(data) if data is not None else {}
        object.__setattr__(self, "_data", items)
        object.__setattr__(self, "_keys", tuple(sorted(items)))

    def __getitem__(self, key: str) -> str:
        try:
            return self._data[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self.items())!r})"

    def __setitem__(self, key: str, value: str) -> None:
        raise ImmutableCollectionError()

    def __delitem__(self, key: str) -> None:
        raise ImmutableCollectionError()

    def __setattr__(self, name: str, value: Any) -> None:
        raise ImmutableCollectionError()

    def __delattr__(self, name: str) -> None:
        raise ImmutableCollectionError()

    def __reduce__(self):
        return self.__class__, (self._data,)

    def get(self, *segments: str) -> str:  # pyright: ignore reportIncompatibleMethodOverride
        """
        Args:
            segments: Path segments of the setting, joined with `/`.

        Returns:
            The value of the setting.

        Raises:
            KeyNotFoundError: If the setting is not present.
        """
        return self[join_key(*segments)]

    def get_or_default(self, fallback: str, *segments: str) -> str:
        """
        Returns:
            The value of the setting, or `fallback` if it is not present.
        """
        return self._data.get(join_key(*segments), fallback)

    def try_get(self, *segments: str) -> Tuple[bool, Optional[str]]:
        """
        Returns:
            Tuple of a flag telling whether the setting is present and its value (`None` if not present).
        """
        key = join_key(*segments)
        if key in self._data:
            return True, self._data[key]
        return False, None

    def require(self, description: str, *segments: str) -> str:
        """
        Same as `get`, but the raised error names what the missing setting describes,
        e.g. `store.require("the background image", "background")`.
        """
        key = join_key(*segments)
        try:
            return self._data[key]
        except KeyError:
            raise KeyNotFoundError(key, description) from None

    def contains_key(self, *segments: str) -> bool:
        return join_key(*segments) in self._data

    def subtree(self, *segments: str) -> KeyStore:
        """
        Returns:
            Store with the settings under the given path prefix, the prefix stripped from their keys.
        """
        prefix = join_key(*segments) + SEPARATOR
        return KeyStore(
            {k[len(prefix) :]: v for k, v in self._data.items() if k.startswith(prefix)}
        )
