"""Class file reader: bytes → CompiledClass.

Reads only what dependency extraction needs: constant pool, access flags,
this/super/interfaces, field and method descriptors, and the class-level
RuntimeVisibleAnnotations attribute. Other attributes are skipped by length.

FAIL-FIRST: ClassFormatError on bad magic, truncation, or dangling indexes.
"""

from __future__ import annotations

import struct

from classdeps.domain.compiled_class import CompiledClass, FieldInfo, MethodInfo
from classdeps.domain.exceptions import ClassFormatError
from classdeps.infrastructure.classfile.constants import (
    ANNOTATION_VALUE_TAG,
    ARRAY_VALUE_TAG,
    CLASS_VALUE_TAG,
    CONST_VALUE_TAGS,
    CONSTANT_SIZES,
    ENUM_VALUE_TAG,
    MAGIC,
    RUNTIME_VISIBLE_ANNOTATIONS,
    WIDE_CONSTANTS,
    ConstantTag,
)

_U2 = struct.Struct(">H")
_U4 = struct.Struct(">I")


def read_class(data: bytes, source: str = "<bytes>") -> CompiledClass:
    """Parse class file bytes.

    Args:
        data: Raw .class content
        source: Origin used in error messages (path or archive member)

    Returns:
        CompiledClass with all names in internal form

    Raises:
        ClassFormatError: If bytes are not a well-formed class file
    """
    reader = _ByteReader(data, source)

    if reader.u4() != MAGIC:
        raise ClassFormatError(source, "bad magic number")
    minor_version = reader.u2()
    major_version = reader.u2()

    pool = _ConstantPool.read(reader)

    access_flags = reader.u2()
    name = pool.class_name(reader.u2())
    super_index = reader.u2()
    super_name = pool.class_name(super_index) if super_index else None
    interfaces = tuple(pool.class_name(reader.u2()) for _ in range(reader.u2()))

    field_entries = _read_members(reader, pool)
    method_entries = _read_members(reader, pool)

    annotations: tuple[str, ...] | None = None
    for attribute_name, body in _read_attributes(reader, pool):
        if attribute_name == RUNTIME_VISIBLE_ANNOTATIONS:
            annotations = _read_annotation_types(_ByteReader(body, source), pool)

    if reader.remaining:
        raise ClassFormatError(source, f"{reader.remaining} trailing bytes")

    class_references = pool.class_entries()

    try:
        fields = tuple(
            FieldInfo(name=member_name, descriptor=descriptor, access_flags=flags)
            for flags, member_name, descriptor in field_entries
        )
        methods = tuple(
            MethodInfo(name=member_name, descriptor=descriptor, access_flags=flags)
            for flags, member_name, descriptor in method_entries
        )
        return CompiledClass(
            name=name,
            super_name=super_name,
            interfaces=interfaces,
            fields=fields,
            methods=methods,
            annotations=annotations,
            class_references=class_references,
            access_flags=access_flags,
            major_version=major_version,
            minor_version=minor_version,
        )
    except ValueError as e:
        raise ClassFormatError(source, str(e)) from e


def decode_modified_utf8(raw: bytes) -> str:
    """Decode JVM modified UTF-8.

    Differences from standard UTF-8:
        NUL is encoded as C0 80
        supplementary characters are encoded as surrogate pairs (3 bytes each)
    """
    text = raw.replace(b"\xc0\x80", b"\x00").decode("utf-8", errors="surrogatepass")
    # Recombine surrogate pairs into real code points
    return text.encode("utf-16", errors="surrogatepass").decode("utf-16")


class _ByteReader:
    """Big-endian cursor over class file bytes."""

    def __init__(self, data: bytes, source: str) -> None:
        self._data = data
        self._source = source
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    @property
    def source(self) -> str:
        return self._source

    def u1(self) -> int:
        return self.take(1)[0]

    def u2(self) -> int:
        return _U2.unpack(self.take(2))[0]

    def u4(self) -> int:
        return _U4.unpack(self.take(4))[0]

    def take(self, size: int) -> bytes:
        if size > self.remaining:
            raise ClassFormatError(
                self._source,
                f"truncated: need {size} bytes at offset {self._pos}, have {self.remaining}",
            )
        chunk = self._data[self._pos : self._pos + size]
        self._pos += size
        return chunk


class _ConstantPool:
    """Resolved view of the constant pool.

    Indexes are 1-based; long and double entries take two slots.
    Only UTF8 and Class payloads are kept, other entries are skipped by size.
    """

    def __init__(
        self,
        tags: dict[int, ConstantTag],
        utf8: dict[int, str],
        classes: dict[int, int],
        source: str,
    ) -> None:
        self._tags = tags
        self._utf8 = utf8
        self._classes = classes
        self._source = source

    @classmethod
    def read(cls, reader: _ByteReader) -> _ConstantPool:
        tags: dict[int, ConstantTag] = {}
        utf8: dict[int, str] = {}
        classes: dict[int, int] = {}

        count = reader.u2()
        index = 1
        while index < count:
            raw_tag = reader.u1()
            try:
                tag = ConstantTag(raw_tag)
            except ValueError as e:
                raise ClassFormatError(
                    reader.source, f"unknown constant tag {raw_tag} at index {index}"
                ) from e

            if tag is ConstantTag.UTF8:
                raw = reader.take(reader.u2())
                try:
                    utf8[index] = decode_modified_utf8(raw)
                except UnicodeError as e:
                    raise ClassFormatError(reader.source, f"bad utf8 constant at {index}") from e
            elif tag is ConstantTag.CLASS:
                classes[index] = reader.u2()
            else:
                reader.take(CONSTANT_SIZES[tag])

            tags[index] = tag
            index += 2 if tag in WIDE_CONSTANTS else 1

        return cls(tags, utf8, classes, reader.source)

    def utf8(self, index: int) -> str:
        self._check(index, ConstantTag.UTF8)
        return self._utf8[index]

    def class_name(self, index: int) -> str:
        self._check(index, ConstantTag.CLASS)
        return self.utf8(self._classes[index])

    def class_entries(self) -> tuple[str, ...]:
        """Every CONSTANT_Class entry, deduplicated, in pool order."""
        names: dict[str, None] = {}
        for index in sorted(self._classes):
            names.setdefault(self.class_name(index), None)
        return tuple(names)

    def _check(self, index: int, expected: ConstantTag) -> None:
        tag = self._tags.get(index)
        if tag is None:
            raise ClassFormatError(self._source, f"constant index {index} is not a usable entry")
        if tag is not expected:
            raise ClassFormatError(
                self._source, f"constant {index} is {tag.name}, expected {expected.name}"
            )


def _read_members(reader: _ByteReader, pool: _ConstantPool) -> list[tuple[int, str, str]]:
    """Read field_info or method_info table as (access_flags, name, descriptor)."""
    members: list[tuple[int, str, str]] = []
    for _ in range(reader.u2()):
        access_flags = reader.u2()
        name = pool.utf8(reader.u2())
        descriptor = pool.utf8(reader.u2())
        # Member attributes (Code, Signature, ...) are not needed
        _read_attributes(reader, pool)
        members.append((access_flags, name, descriptor))
    return members


def _read_attributes(reader: _ByteReader, pool: _ConstantPool) -> list[tuple[str, bytes]]:
    """Read attribute table as (name, body)."""
    attributes: list[tuple[str, bytes]] = []
    for _ in range(reader.u2()):
        name = pool.utf8(reader.u2())
        body = reader.take(reader.u4())
        attributes.append((name, body))
    return attributes


def _read_annotation_types(reader: _ByteReader, pool: _ConstantPool) -> tuple[str, ...]:
    """Read RuntimeVisibleAnnotations body, keeping each annotation's type descriptor."""
    types = tuple(_read_annotation(reader, pool) for _ in range(reader.u2()))
    if reader.remaining:
        raise ClassFormatError(reader.source, "annotation attribute length mismatch")
    return types


def _read_annotation(reader: _ByteReader, pool: _ConstantPool) -> str:
    type_descriptor = pool.utf8(reader.u2())
    for _ in range(reader.u2()):
        reader.u2()  # element_name_index
        _skip_element_value(reader)
    return type_descriptor


def _skip_element_value(reader: _ByteReader) -> None:
    tag = chr(reader.u1())
    if tag in CONST_VALUE_TAGS or tag == CLASS_VALUE_TAG:
        reader.u2()
    elif tag == ENUM_VALUE_TAG:
        reader.u2()  # type_name_index
        reader.u2()  # const_name_index
    elif tag == ANNOTATION_VALUE_TAG:
        reader.u2()
        for _ in range(reader.u2()):
            reader.u2()
            _skip_element_value(reader)
    elif tag == ARRAY_VALUE_TAG:
        for _ in range(reader.u2()):
            _skip_element_value(reader)
    else:
        raise ClassFormatError(reader.source, f"unknown element_value tag {tag!r}")
