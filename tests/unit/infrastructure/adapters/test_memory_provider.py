"""Tests for infrastructure/adapters/memory_provider.py."""

import pytest

from classdeps.domain.exceptions import ClassFormatError, ClassNotFoundError
from classdeps.infrastructure.adapters.memory_provider import InMemoryClassProvider
from tests.factories import ClassFileBuilder, make_class


class TestInMemoryClassProvider:
    """Tests for InMemoryClassProvider."""

    def test_resolve_compiled_class(self) -> None:
        cls = make_class("com/acme/Foo")
        provider = InMemoryClassProvider.of(cls)
        assert provider.resolve("com.acme.Foo") is cls

    def test_dotted_keys_normalized(self) -> None:
        cls = make_class("com/acme/Foo")
        provider = InMemoryClassProvider({"com.acme.Foo": cls})
        assert provider.resolve("com/acme/Foo") is cls
        assert provider.class_names == {"com/acme/Foo"}

    def test_resolve_bytes(self) -> None:
        provider = InMemoryClassProvider({"com.acme.Foo": ClassFileBuilder("com/acme/Foo").build()})
        assert provider.resolve("com.acme.Foo").name == "com/acme/Foo"

    def test_missing_class(self) -> None:
        provider = InMemoryClassProvider({})
        with pytest.raises(ClassNotFoundError) as exc_info:
            provider.resolve("com.acme.Foo")
        assert exc_info.value.class_name == "com.acme.Foo"

    def test_key_mismatch_rejected(self) -> None:
        provider = InMemoryClassProvider({"com.acme.Foo": make_class("com/acme/Bar")})
        with pytest.raises(ClassFormatError, match="Bar"):
            provider.resolve("com.acme.Foo")

    def test_malformed_bytes(self) -> None:
        provider = InMemoryClassProvider({"com.acme.Foo": b"junk"})
        with pytest.raises(ClassFormatError):
            provider.resolve("com.acme.Foo")
        assert provider.leased == frozenset()

    def test_unsupported_value_rejected(self) -> None:
        with pytest.raises(TypeError, match="CompiledClass or bytes"):
            InMemoryClassProvider({"com.acme.Foo": "not a class"})  # type: ignore[dict-item]

    def test_release_idempotent(self) -> None:
        provider = InMemoryClassProvider.of(make_class("com/acme/Foo"))
        cls = provider.resolve("com.acme.Foo")
        assert provider.leased == {"com/acme/Foo"}
        provider.release(cls)
        provider.release(cls)
        assert provider.leased == frozenset()

    def test_release_unknown_is_noop(self) -> None:
        provider = InMemoryClassProvider.of(make_class("com/acme/Foo"))
        provider.release(make_class("com/acme/Other"))
        assert provider.leased == frozenset()
