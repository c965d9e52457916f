"""Tests for infrastructure/analyzers/members.py."""

import pytest

from classdeps.domain.exceptions import DescriptorParseError, MethodNotFoundError
from classdeps.infrastructure.analyzers.members import (
    field_types,
    method_signature_types,
    select_methods,
)
from tests.factories import make_class, make_order_service


class TestFieldTypes:
    """Tests for field_types()."""

    def test_object_and_primitive_fields(self) -> None:
        cls = make_class(fields={"name": "Ljava/lang/String;", "count": "I"})
        assert field_types(cls) == {"java.lang.String"}

    def test_arrays(self) -> None:
        cls = make_class(
            fields={
                "names": "[Ljava/lang/String;",
                "grid": "[[Ljava/awt/Point;",
                "bytes": "[B",
            }
        )
        assert field_types(cls) == {"java.lang.String", "java.awt.Point"}

    def test_static_and_instance_not_distinguished(self) -> None:
        cls = make_order_service()
        assert field_types(cls) == {"com.acme.OrderRepository", "org.slf4j.Logger"}

    def test_no_fields(self) -> None:
        assert field_types(make_class()) == frozenset()

    def test_malformed_field_descriptor_raises(self) -> None:
        cls = make_class(fields={"broken": "Ljava/lang/String"})
        with pytest.raises(DescriptorParseError):
            field_types(cls)


class TestMethodSignatureTypes:
    """Tests for method_signature_types()."""

    def test_all_methods(self) -> None:
        cls = make_order_service()
        assert method_signature_types(cls) == {
            "com.acme.OrderRepository",
            "java.lang.String",
            "java.util.List",
            "com.acme.Order",
        }

    def test_single_method_by_name(self) -> None:
        cls = make_order_service()
        assert method_signature_types(cls, "find") == {"java.lang.String", "java.util.List"}

    def test_constructor_included(self) -> None:
        cls = make_order_service()
        assert method_signature_types(cls, "<init>") == {"com.acme.OrderRepository"}

    def test_name_only_covers_every_overload(self) -> None:
        cls = make_class(
            methods=(
                ("parse", "(Ljava/lang/String;)Lcom/acme/Doc;"),
                ("parse", "(Ljava/io/InputStream;)Lcom/acme/Doc;"),
            )
        )
        assert method_signature_types(cls, "parse") == {
            "java.lang.String",
            "java.io.InputStream",
            "com.acme.Doc",
        }

    def test_name_and_descriptor_selects_one_overload(self) -> None:
        cls = make_class(
            methods=(
                ("parse", "(Ljava/lang/String;)Lcom/acme/Doc;"),
                ("parse", "(Ljava/io/InputStream;)Lcom/acme/Doc;"),
            )
        )
        result = method_signature_types(cls, "parse", "(Ljava/io/InputStream;)Lcom/acme/Doc;")
        assert result == {"java.io.InputStream", "com.acme.Doc"}

    def test_unknown_method_raises(self) -> None:
        with pytest.raises(MethodNotFoundError) as exc_info:
            method_signature_types(make_order_service(), "missing")
        assert exc_info.value.method_name == "missing"
        assert exc_info.value.class_name == "com.acme.OrderService"

    def test_unknown_overload_raises(self) -> None:
        with pytest.raises(MethodNotFoundError):
            method_signature_types(make_order_service(), "find", "()V")

    def test_primitive_only_signature(self) -> None:
        cls = make_class(methods=(("size", "()I"),))
        assert method_signature_types(cls) == frozenset()


class TestSelectMethods:
    """Tests for select_methods()."""

    def test_all_in_declaration_order(self) -> None:
        cls = make_order_service()
        assert [m.name for m in select_methods(cls)] == ["<init>", "find", "cancel"]

    def test_descriptor_without_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="requires method name"):
            select_methods(make_order_service(), None, "()V")
