"""Class file format constants."""

from enum import IntEnum

MAGIC = 0xCAFEBABE

RUNTIME_VISIBLE_ANNOTATIONS = "RuntimeVisibleAnnotations"


class ConstantTag(IntEnum):
    """Constant pool entry tags."""

    UTF8 = 1
    INTEGER = 3
    FLOAT = 4
    LONG = 5
    DOUBLE = 6
    CLASS = 7
    STRING = 8
    FIELDREF = 9
    METHODREF = 10
    INTERFACE_METHODREF = 11
    NAME_AND_TYPE = 12
    METHOD_HANDLE = 15
    METHOD_TYPE = 16
    DYNAMIC = 17
    INVOKE_DYNAMIC = 18
    MODULE = 19
    PACKAGE = 20


# Payload size in bytes for fixed-size entries (UTF8 is variable)
CONSTANT_SIZES: dict[ConstantTag, int] = {
    ConstantTag.INTEGER: 4,
    ConstantTag.FLOAT: 4,
    ConstantTag.LONG: 8,
    ConstantTag.DOUBLE: 8,
    ConstantTag.CLASS: 2,
    ConstantTag.STRING: 2,
    ConstantTag.FIELDREF: 4,
    ConstantTag.METHODREF: 4,
    ConstantTag.INTERFACE_METHODREF: 4,
    ConstantTag.NAME_AND_TYPE: 4,
    ConstantTag.METHOD_HANDLE: 3,
    ConstantTag.METHOD_TYPE: 2,
    ConstantTag.DYNAMIC: 4,
    ConstantTag.INVOKE_DYNAMIC: 4,
    ConstantTag.MODULE: 2,
    ConstantTag.PACKAGE: 2,
}

# Long and double occupy two constant pool slots
WIDE_CONSTANTS = frozenset({ConstantTag.LONG, ConstantTag.DOUBLE})

# Annotation element_value tags
CONST_VALUE_TAGS = frozenset("BCDFIJSZs")
ENUM_VALUE_TAG = "e"
CLASS_VALUE_TAG = "c"
ANNOTATION_VALUE_TAG = "@"
ARRAY_VALUE_TAG = "["
