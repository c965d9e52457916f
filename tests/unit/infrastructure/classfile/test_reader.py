"""Tests for infrastructure/classfile/reader.py.

Tests:
- read_class: structure, members, annotations, constant pool class entries
- decode_modified_utf8: NUL and supplementary characters
- Error handling: ClassFormatError on malformed bytes
"""

import pytest

from classdeps.domain.exceptions import ClassFormatError
from classdeps.infrastructure.classfile.reader import decode_modified_utf8, read_class
from tests.factories import ClassFileBuilder, u2


class TestReadStructure:
    """Class header, superclass, interfaces."""

    def test_names_and_versions(self) -> None:
        builder = ClassFileBuilder("com/acme/Foo", "com/acme/Base", major_version=61)
        builder.add_interface("java/io/Serializable").add_interface("java/lang/Runnable")

        cls = read_class(builder.build())

        assert cls.name == "com/acme/Foo"
        assert cls.super_name == "com/acme/Base"
        assert cls.interfaces == ("java/io/Serializable", "java/lang/Runnable")
        assert cls.major_version == 61
        assert cls.minor_version == 0
        assert cls.access_flags == 0x0021

    def test_root_object_has_no_superclass(self) -> None:
        cls = read_class(ClassFileBuilder("java/lang/Object", None).build())
        assert cls.super_name is None

    def test_interface_flag(self) -> None:
        builder = ClassFileBuilder("com/acme/Api", access_flags=0x0601)
        assert read_class(builder.build()).is_interface


class TestReadMembers:
    """Fields and methods."""

    def test_fields(self) -> None:
        builder = ClassFileBuilder("com/acme/Foo")
        builder.add_field("name", "Ljava/lang/String;")
        builder.add_field("COUNT", "I", access_flags=0x0018)

        cls = read_class(builder.build())

        assert [(f.name, f.descriptor) for f in cls.fields] == [
            ("name", "Ljava/lang/String;"),
            ("COUNT", "I"),
        ]
        assert cls.fields[1].is_static

    def test_methods_with_and_without_code(self) -> None:
        builder = ClassFileBuilder("com/acme/Foo")
        builder.add_method("<init>", "()V")
        builder.add_method(
            "run", "(Ljava/util/List;)Ljava/util/Map;", access_flags=0x0401, code=None
        )

        cls = read_class(builder.build())

        assert [m.key for m in cls.methods] == [
            ("<init>", "()V"),
            ("run", "(Ljava/util/List;)Ljava/util/Map;"),
        ]
        assert cls.methods[0].is_constructor

    def test_overloads_kept_separately(self) -> None:
        builder = ClassFileBuilder("com/acme/Foo")
        builder.add_method("get", "(I)Ljava/lang/Object;")
        builder.add_method("get", "(Ljava/lang/String;)Ljava/lang/Object;")

        cls = read_class(builder.build())

        assert len(cls.methods_named("get")) == 2


class TestReadAnnotations:
    """RuntimeVisibleAnnotations attribute."""

    def test_absent_attribute_is_none(self) -> None:
        cls = read_class(ClassFileBuilder("com/acme/Foo").build())
        assert cls.annotations is None

    def test_annotation_types(self) -> None:
        builder = ClassFileBuilder("com/acme/Foo")
        builder.add_annotation("Ljavax/inject/Singleton;")
        builder.add_annotation("Ljava/lang/Deprecated;")

        cls = read_class(builder.build())

        assert cls.annotations == ("Ljavax/inject/Singleton;", "Ljava/lang/Deprecated;")

    def test_every_element_value_kind_skipped(self) -> None:
        builder = ClassFileBuilder("com/acme/Foo")
        builder.add_annotation(
            "Lcom/acme/Config;",
            size=builder.ev_int(3),
            label=builder.ev_string("x"),
            mode=builder.ev_enum("Lcom/acme/Mode;", "FAST"),
            target=builder.ev_class("Ljava/lang/String;"),
            nested=builder.ev_annotation("Lcom/acme/Inner;", value=builder.ev_int(1)),
            tags=builder.ev_array(builder.ev_string("a"), builder.ev_string("b")),
        )
        builder.add_annotation("Lcom/acme/After;")

        cls = read_class(builder.build())

        assert cls.annotations == ("Lcom/acme/Config;", "Lcom/acme/After;")

    def test_unknown_attributes_skipped(self) -> None:
        builder = ClassFileBuilder("com/acme/Foo")
        builder.add_attribute("SourceFile", u2(builder.utf8("Foo.java")))
        builder.add_annotation("Lcom/acme/Tag;")

        cls = read_class(builder.build())

        assert cls.annotations == ("Lcom/acme/Tag;",)


class TestReadConstantPool:
    """Class entries of the constant pool."""

    def test_class_entries_include_body_references(self) -> None:
        builder = ClassFileBuilder("com/acme/Foo")
        builder.reference_class("java/util/ArrayList")
        builder.reference_class("[I")
        builder.reference_class("[Ljava/lang/Object;")

        cls = read_class(builder.build())

        assert set(cls.class_references) == {
            "com/acme/Foo",
            "java/lang/Object",
            "java/util/ArrayList",
            "[I",
            "[Ljava/lang/Object;",
        }

    def test_methodref_owner_is_class_entry(self) -> None:
        builder = ClassFileBuilder("com/acme/Foo")
        builder.methodref(
            "java/util/Objects", "requireNonNull", "(Ljava/lang/Object;)Ljava/lang/Object;"
        )

        cls = read_class(builder.build())

        assert "java/util/Objects" in cls.class_references

    def test_wide_constants_take_two_slots(self) -> None:
        builder = ClassFileBuilder("com/acme/Foo")
        builder.long_const(1 << 40)
        builder.double_const(2.5)
        builder.reference_class("com/acme/AfterWide")
        builder.string_const("text")

        cls = read_class(builder.build())

        assert "com/acme/AfterWide" in cls.class_references

    def test_annotation_types_are_not_class_entries(self) -> None:
        builder = ClassFileBuilder("com/acme/Foo")
        builder.add_annotation("Lcom/acme/Tag;")

        cls = read_class(builder.build())

        assert "com/acme/Tag" not in cls.class_references


class TestReadErrors:
    """Malformed bytes raise ClassFormatError."""

    def test_bad_magic(self) -> None:
        data = b"\x00\x00\x00\x00" + ClassFileBuilder("com/acme/Foo").build()[4:]
        with pytest.raises(ClassFormatError, match="magic"):
            read_class(data)

    def test_truncated(self) -> None:
        data = ClassFileBuilder("com/acme/Foo").build()
        with pytest.raises(ClassFormatError, match="truncated"):
            read_class(data[:-3], source="Foo.class")

    def test_trailing_bytes(self) -> None:
        data = ClassFileBuilder("com/acme/Foo").build() + b"\x00"
        with pytest.raises(ClassFormatError, match="trailing"):
            read_class(data)

    def test_source_in_message(self) -> None:
        with pytest.raises(ClassFormatError) as exc_info:
            read_class(b"", source="lib/a.jar!/Foo.class")
        assert exc_info.value.source == "lib/a.jar!/Foo.class"

    def test_unknown_constant_tag(self) -> None:
        header = b"\xca\xfe\xba\xbe" + u2(0) + u2(52)
        data = header + u2(2) + b"\x02"
        with pytest.raises(ClassFormatError, match="unknown constant tag"):
            read_class(data)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            read_class(b"junk")


class TestDecodeModifiedUtf8:
    """Tests for decode_modified_utf8()."""

    def test_ascii(self) -> None:
        assert decode_modified_utf8(b"java/lang/String") == "java/lang/String"

    def test_encoded_nul(self) -> None:
        assert decode_modified_utf8(b"a\xc0\x80b") == "a\x00b"

    def test_surrogate_pair(self) -> None:
        # U+1F600 as two 3-byte encoded surrogates (D83D DE00)
        raw = b"\xed\xa0\xbd\xed\xb8\x80"
        assert decode_modified_utf8(raw) == "\U0001f600"

    def test_two_byte_characters(self) -> None:
        assert decode_modified_utf8("Café".encode()) == "Café"
