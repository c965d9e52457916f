"""Domain layer: compiled class model.

Read-only view of one parsed class file. Produced by the class-file
reader (or built directly in memory), consumed by every extractor.
FAIL-FIRST: invalid input raises immediately.
"""

from __future__ import annotations

from dataclasses import dataclass

# Access flag bits shared by classes, fields and methods
ACC_PUBLIC = 0x0001
ACC_PRIVATE = 0x0002
ACC_PROTECTED = 0x0004
ACC_STATIC = 0x0008
ACC_FINAL = 0x0010
ACC_INTERFACE = 0x0200
ACC_ABSTRACT = 0x0400
ACC_SYNTHETIC = 0x1000
ACC_ANNOTATION = 0x2000
ACC_ENUM = 0x4000

CONSTRUCTOR_NAME = "<init>"
STATIC_INITIALIZER_NAME = "<clinit>"


@dataclass(frozen=True, slots=True)
class FieldInfo:
    """Declared field.

    Examples:
        private String name;      → FieldInfo("name", "Ljava/lang/String;", 0x0002)
        static int[] counts;      → FieldInfo("counts", "[I", 0x0008)
    """

    name: str
    descriptor: str
    access_flags: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("field name must not be empty")
        if not self.descriptor:
            raise ValueError(f"field {self.name!r} descriptor must not be empty")

    @property
    def is_static(self) -> bool:
        """Field declared static."""
        return bool(self.access_flags & ACC_STATIC)


@dataclass(frozen=True, slots=True)
class MethodInfo:
    """Declared method or constructor.

    Overloads share a name but never a (name, descriptor) key.

    Examples:
        String get(int i)         → MethodInfo("get", "(I)Ljava/lang/String;")
        Foo(List<String> items)   → MethodInfo("<init>", "(Ljava/util/List;)V")
    """

    name: str
    descriptor: str
    access_flags: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("method name must not be empty")
        if not self.descriptor.startswith("("):
            raise ValueError(
                f"method {self.name!r} descriptor must start with '(', got {self.descriptor!r}"
            )

    @property
    def key(self) -> tuple[str, str]:
        """Unique lookup key within one class."""
        return (self.name, self.descriptor)

    @property
    def is_constructor(self) -> bool:
        """Instance initializer."""
        return self.name == CONSTRUCTOR_NAME


@dataclass(frozen=True, slots=True)
class CompiledClass:
    """Parsed compiled class.

    All names are internal names (slash-separated). Array entries in
    class_references keep their descriptor form ("[I", "[Ljava/lang/Object;").

    Attributes:
        name: Internal name of this class.
        super_name: Internal name of superclass. None only for the root object type.
        interfaces: Internal names of directly implemented interfaces.
        fields: Declared fields.
        methods: Declared methods, constructors and static initializer included.
        annotations: Visible annotation type descriptors. None if attribute absent.
        class_references: Every class entry of the constant pool.
        access_flags: Class access flags.
        major_version: Class file major version (0 when built in memory).
        minor_version: Class file minor version.

    Invariants (FAIL-FIRST):
        - name non-empty
        - method keys unique
    """

    name: str
    super_name: str | None = None
    interfaces: tuple[str, ...] = ()
    fields: tuple[FieldInfo, ...] = ()
    methods: tuple[MethodInfo, ...] = ()
    annotations: tuple[str, ...] | None = None
    class_references: tuple[str, ...] = ()
    access_flags: int = 0
    major_version: int = 0
    minor_version: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("class name must not be empty")

        seen: set[tuple[str, str]] = set()
        for method in self.methods:
            if method.key in seen:
                name, descriptor = method.key
                raise ValueError(f"duplicate method {name}{descriptor} in {self.name!r}")
            seen.add(method.key)

    @property
    def dotted_name(self) -> str:
        """Fully qualified dotted name."""
        return self.name.replace("/", ".")

    @property
    def is_interface(self) -> bool:
        """Declared as interface (annotation types included)."""
        return bool(self.access_flags & ACC_INTERFACE)

    def methods_named(self, name: str) -> tuple[MethodInfo, ...]:
        """All overloads declared with given name, in declaration order."""
        return tuple(method for method in self.methods if method.name == name)

    def method(self, name: str, descriptor: str) -> MethodInfo | None:
        """Exact overload lookup by (name, descriptor)."""
        for candidate in self.methods:
            if candidate.key == (name, descriptor):
                return candidate
        return None
