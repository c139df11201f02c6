import copy
import pickle

import pytest

from confchain.config import (
    ConfigError,
    ErrorKind,
    ImmutableCollectionError,
    KeyNotFoundError,
    KeyStore,
)


@pytest.fixture()
def store() -> KeyStore:
    return KeyStore(
        {
            "video/title": "The Nether Update",
            "background": "bg.png",
            "padding/vertical": "4%",
            "padding/horizontal": "5%",
        }
    )


def test_key_store_get(store: KeyStore):
    assert store.get("background") == "bg.png"
    assert store.get("padding", "horizontal") == "5%"
    assert store.get("padding/horizontal") == "5%"
    assert store["video/title"] == "The Nether Update"


def test_key_store_get_missing(store: KeyStore):
    with pytest.raises(KeyNotFoundError) as e:
        store.get("missing", "key")
    assert e.value.key == "missing/key"
    assert e.value.kind == ErrorKind.KEY_NOT_FOUND
    assert "missing/key" in str(e.value)

    # usable as a plain KeyError as well
    with pytest.raises(KeyError):
        store["missing"]
    with pytest.raises(ConfigError):
        store.get("Background")


def test_key_store_get_or_default(store: KeyStore):
    assert store.get_or_default("fallback", "missing", "key") == "fallback"
    assert store.get_or_default("fallback", "padding", "vertical") == "4%"


def test_key_store_get_second_argument_is_a_segment(store: KeyStore):
    # unlike Mapping.get, a second argument is another path segment, not a default
    with pytest.raises(KeyNotFoundError) as e:
        store.get("background", "fallback.png")
    assert e.value.key == "background/fallback.png"


def test_key_store_try_get(store: KeyStore):
    assert store.try_get("missing", "key") == (False, None)
    assert store.try_get("video", "title") == (True, "The Nether Update")
    assert len(store) == 4


def test_key_store_require(store: KeyStore):
    assert store.require("the background image", "background") == "bg.png"

    with pytest.raises(KeyNotFoundError) as e:
        store.require("the game logo", "logo")
    assert e.value.description == "the game logo"
    assert "the game logo" in str(e.value)


def test_key_store_sorted_enumeration(store: KeyStore):
    expected = ["background", "padding/horizontal", "padding/vertical", "video/title"]
    assert list(store) == expected
    assert list(store.keys()) == expected
    assert list(store.values()) == ["bg.png", "5%", "4%", "The Nether Update"]
    assert [k for k, _ in store.items()] == expected


def test_key_store_containment(store: KeyStore):
    assert "background" in store
    assert "padding/vertical" in store
    assert "padding" not in store
    assert 42 not in store
    assert store.contains_key("padding", "vertical")
    assert not store.contains_key("padding")


def test_key_store_subtree(store: KeyStore):
    padding = store.subtree("padding")
    assert dict(padding) == {"horizontal": "5%", "vertical": "4%"}
    assert len(store.subtree("nothing")) == 0


def test_key_store_equality(store: KeyStore):
    assert store == KeyStore(dict(store))
    assert store == dict(store)
    assert store != KeyStore()


def test_key_store_immutable(store: KeyStore):
    with pytest.raises(ImmutableCollectionError) as e:
        store["background"] = "other.png"  # type: ignore
    assert e.value.kind == ErrorKind.IMMUTABLE_COLLECTION

    with pytest.raises(ImmutableCollectionError):
        del store["background"]  # type: ignore
    with pytest.raises(ImmutableCollectionError):
        store._data = {}  # type: ignore
    with pytest.raises(TypeError):
        store.attribute = "value"  # type: ignore

    assert not hasattr(store, "clear")
    assert not hasattr(store, "pop")
    assert not hasattr(store, "update")
    assert store.get("background") == "bg.png"


def test_key_store_decoupled_from_source():
    source = {"a": "1"}
    store = KeyStore(source)
    source["a"] = "2"
    source["b"] = "3"
    assert dict(store) == {"a": "1"}


def test_key_store_copy_and_pickle(store: KeyStore):
    assert copy.copy(store) == store
    assert copy.deepcopy(store) == store
    assert pickle.loads(pickle.dumps(store)) == store
