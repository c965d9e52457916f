"""Tests for infrastructure/analyzers/structure.py."""

from classdeps.infrastructure.analyzers.structure import interfaces, superclass
from tests.factories import make_class


class TestSuperclass:
    """Tests for superclass()."""

    def test_converts_to_dotted(self) -> None:
        cls = make_class(super_name="com/acme/BaseService")
        assert superclass(cls) == "com.acme.BaseService"

    def test_root_object_type_has_none(self) -> None:
        cls = make_class("java/lang/Object", super_name=None)
        assert superclass(cls) is None

    def test_empty_name_treated_as_absent(self) -> None:
        cls = make_class(super_name="")
        assert superclass(cls) is None


class TestInterfaces:
    """Tests for interfaces()."""

    def test_converts_each_name(self) -> None:
        cls = make_class(interfaces=("java/io/Serializable", "java/lang/Comparable"))
        assert interfaces(cls) == {"java.io.Serializable", "java.lang.Comparable"}

    def test_no_interfaces(self) -> None:
        assert interfaces(make_class()) == frozenset()

    def test_names_are_not_descriptors(self) -> None:
        """Interface entries are plain internal names, no L...; wrapping."""
        cls = make_class(interfaces=("com/acme/Lifecycle",))
        assert interfaces(cls) == {"com.acme.Lifecycle"}
