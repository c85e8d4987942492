import pytest

from enginecore.texture_registry import ERROR_TEXTURE_NAME, TextureRegistry


class _Texture:
    def __init__(self, name):
        self.name = name


def test_transfer_then_get():
    registry = TextureRegistry()
    texture = _Texture("wood")
    assert registry.transfer("wood.png", texture) is True
    assert registry.is_registered("wood.png")
    assert registry.get("wood.png") is texture


def test_unknown_name_falls_back_to_error_texture():
    registry = TextureRegistry()
    error_texture = _Texture("error")
    registry.transfer(ERROR_TEXTURE_NAME, error_texture)
    assert registry.get("missing.png") is error_texture


def test_unknown_name_without_fallback_raises():
    registry = TextureRegistry()
    with pytest.raises(KeyError):
        registry.get("missing.png")


def test_duplicate_transfer_releases_new_texture():
    released = []
    registry = TextureRegistry(on_release=released.append)
    first = _Texture("first")
    second = _Texture("second")
    registry.transfer("tex.png", first)
    assert registry.transfer("tex.png", second) is False
    assert registry.get("tex.png") is first
    assert released == [second]


def test_unload_releases_and_removes():
    released = []
    registry = TextureRegistry(on_release=released.append)
    texture = _Texture("t")
    registry.transfer("t.png", texture)
    registry.unload("t.png")
    assert not registry.is_registered("t.png")
    assert released == [texture]
    assert registry.names() == []


def test_unload_unknown_does_nothing():
    released = []
    registry = TextureRegistry(on_release=released.append)
    registry.transfer("kept.png", _Texture("kept"))
    registry.unload("absent.png")
    assert released == []
    assert registry.names() == ["kept.png"]


def test_names_lists_all():
    registry = TextureRegistry()
    registry.transfer("a.png", _Texture("a"))
    registry.transfer("b.png", _Texture("b"))
    assert sorted(registry.names()) == ["a.png", "b.png"]