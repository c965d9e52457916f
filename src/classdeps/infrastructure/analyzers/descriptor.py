"""Type descriptor decoder.

Grammar (JVM field and method descriptors):
    field_type   := '['* component
    component    := 'B' | 'C' | 'D' | 'F' | 'I' | 'J' | 'S' | 'Z' | 'L' internal_name ';'
    return_type  := field_type | 'V'
    method       := '(' field_type* ')' return_type

Decoding is a single left-to-right scan. A descriptor is either one
field_type or one method; anything else is rejected with its position.
Every L...; segment names exactly one type; primitives, void and
primitive arrays name none.
"""

from __future__ import annotations

from classdeps.domain.exceptions import DescriptorParseError

PRIMITIVE_CODES = frozenset("BCDFIJSZ")
ARRAY_MARKER = "["
OBJECT_START = "L"
OBJECT_END = ";"
PARAMETERS_START = "("
PARAMETERS_END = ")"
_ILLEGAL_NAME_CHARS = frozenset("().[")


def internal_to_dotted(name: str) -> str:
    """Convert internal name (java/lang/String) to dotted (java.lang.String)."""
    return name.replace("/", ".")


def dotted_to_internal(name: str) -> str:
    """Convert dotted name (java.lang.String) to internal (java/lang/String)."""
    return name.replace(".", "/")


def decode(descriptor: str) -> tuple[str, ...]:
    """Decode every type referenced by a field or method descriptor.

    Args:
        descriptor: Field descriptor ("[Ljava/lang/String;") or
            method descriptor ("(Ljava/lang/String;I)Ljava/util/List;")

    Returns:
        Dotted type names in order of appearance (duplicates kept)

    Raises:
        DescriptorParseError: Empty descriptor, unterminated or empty L...;
            segment, dangling '[', misplaced parentheses or void,
            unrecognized character, or trailing characters

    Example:
        >>> decode("(Ljava/lang/String;I)Ljava/util/List;")
        ('java.lang.String', 'java.util.List')
        >>> decode("[I")
        ()
    """
    if not descriptor:
        raise DescriptorParseError(descriptor, 0, "empty descriptor")

    names: list[str] = []
    length = len(descriptor)

    if descriptor[0] == PARAMETERS_START:
        pos = 1
        while True:
            if pos >= length:
                raise DescriptorParseError(descriptor, pos, "parameter list not closed by ')'")
            if descriptor[pos] == PARAMETERS_END:
                pos += 1
                break
            pos = _read_field_type(descriptor, pos, names, allow_void=False)

        if pos >= length:
            raise DescriptorParseError(descriptor, pos, "missing return type")
        pos = _read_field_type(descriptor, pos, names, allow_void=True)
    else:
        pos = _read_field_type(descriptor, 0, names, allow_void=False)

    if pos != length:
        raise DescriptorParseError(descriptor, pos, "trailing characters after type")

    return tuple(names)


def _read_field_type(descriptor: str, start: int, names: list[str], *, allow_void: bool) -> int:
    """Read one field type (or void return type) at start, collecting its name.

    Returns:
        Position after the type
    """
    # Array markers affect arity only
    pos = start
    length = len(descriptor)
    while pos < length and descriptor[pos] == ARRAY_MARKER:
        pos += 1
    dimensions = pos - start

    if pos >= length:
        raise DescriptorParseError(descriptor, start, "array marker without component type")

    char = descriptor[pos]
    match char:
        case "L":
            name, pos = _read_object_type(descriptor, pos)
            names.append(internal_to_dotted(name))
            return pos
        case _ if char in PRIMITIVE_CODES:
            return pos + 1
        case "V" if dimensions:
            raise DescriptorParseError(descriptor, pos, "array of void")
        case "V" if allow_void:
            return pos + 1
        case "V":
            raise DescriptorParseError(descriptor, pos, "void is only valid as return type")
        case _:
            raise DescriptorParseError(descriptor, pos, f"unexpected character {char!r}")


def decode_object_type(descriptor: str) -> str:
    """Decode a descriptor that must be exactly one object reference.

    Used for annotation types: never array, never primitive.

    Args:
        descriptor: Descriptor of form L<internal-name>;

    Returns:
        Dotted type name

    Raises:
        DescriptorParseError: If descriptor is anything else
    """
    if not descriptor.startswith(OBJECT_START):
        raise DescriptorParseError(descriptor, 0, "expected object type 'L...;'")

    name, end = _read_object_type(descriptor, 0)
    if end != len(descriptor):
        raise DescriptorParseError(descriptor, end, "trailing characters after object type")

    return internal_to_dotted(name)


def _read_object_type(descriptor: str, start: int) -> tuple[str, int]:
    """Read L<internal-name>; starting at 'L'.

    Returns:
        (internal name, position after ';')
    """
    end = descriptor.find(OBJECT_END, start + 1)
    if end == -1:
        raise DescriptorParseError(descriptor, start, "object type not terminated by ';'")

    name = descriptor[start + 1 : end]
    if not name:
        raise DescriptorParseError(descriptor, start, "empty class name in object type")

    for offset, char in enumerate(name, start=start + 1):
        if char in _ILLEGAL_NAME_CHARS:
            raise DescriptorParseError(
                descriptor, offset, f"illegal character {char!r} in class name"
            )

    return name, end + 1
