"""Field accessor sets and the default introspection provider.

Usage:
    @dataclass(slots=True)
    class Header:
        length: int
        _checksum: int = 0

    accessors = build_accessor_set(Header)
    bound = accessors.with_target(Header(length=3))
    bound.read(0)  # 3
"""

from __future__ import annotations

import dataclasses
import inspect
import re
from collections.abc import Iterator
from typing import Any, ClassVar, get_origin

from structcopy.core.accessor.models import FieldSpec
from structcopy.errors import IntrospectionError

_IGNORED_SLOTS = frozenset({"__dict__", "__weakref__"})
_CLASSVAR_PATTERN = re.compile(r"(?:typing\.|t\.)?ClassVar(?:\[|$)")
_INITVAR_PATTERN = re.compile(r"(?:dataclasses\.)?InitVar(?:\[|$)")


class FieldAccessorSet:
    """Ordered, immutable field metadata for one type.

    Not bound to any instance. Use `with_target` to read and write values.

    Args:
        field_type: Type the accessor set was built for.
        fields: Field metadata in index order.
    """

    __slots__ = ("_field_type", "_fields")

    def __init__(self, field_type: type, fields: tuple[FieldSpec, ...]) -> None:
        self._field_type = field_type
        self._fields = fields

    @property
    def field_type(self) -> type:
        """Return the type this accessor set was built for."""
        return self._field_type

    @property
    def fields(self) -> tuple[FieldSpec, ...]:
        """Return field metadata in index order."""
        return self._fields

    def size(self) -> int:
        """Return the number of fields."""
        return len(self._fields)

    def get_field(self, index: int) -> FieldSpec:
        """Return metadata for the field at `index`."""
        return self._fields[index]

    def with_target(self, target: Any) -> BoundAccessor:
        """Bind this accessor set to one instance.

        Args:
            target: Instance whose fields will be read or written.

        Returns:
            A fresh BoundAccessor; bindings are never shared.
        """
        return BoundAccessor(self, target)

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self._fields)

    def __repr__(self) -> str:
        names = ", ".join(f.name for f in self._fields)
        return f"FieldAccessorSet({self._field_type.__qualname__}: {names})"


class BoundAccessor:
    """A FieldAccessorSet paired with one target instance.

    Writes go through `object.__setattr__`, so frozen dataclasses and classes
    with a custom `__setattr__` are written directly.
    """

    __slots__ = ("_accessors", "_target")

    def __init__(self, accessors: FieldAccessorSet, target: Any) -> None:
        self._accessors = accessors
        self._target = target

    @property
    def target(self) -> Any:
        """Return the bound instance."""
        return self._target

    @property
    def accessors(self) -> FieldAccessorSet:
        """Return the unbound accessor set."""
        return self._accessors

    def size(self) -> int:
        """Return the number of fields."""
        return self._accessors.size()

    def get_field(self, index: int) -> FieldSpec:
        """Return metadata for the field at `index`."""
        return self._accessors.get_field(index)

    def read(self, index: int) -> Any:
        """Read the value of the field at `index`.

        Raises:
            AttributeError: If the field has no value on the target.
        """
        spec = self._accessors.get_field(index)
        if spec.is_static:
            return getattr(spec.declaring_type, spec.name)
        return getattr(self._target, spec.name)

    def write(self, index: int, value: Any) -> None:
        """Write `value` into the field at `index`."""
        spec = self._accessors.get_field(index)
        if spec.is_static:
            setattr(spec.declaring_type, spec.name, value)
        else:
            object.__setattr__(self._target, spec.name, value)

    def is_set(self, index: int) -> bool:
        """Check whether the field at `index` currently holds a value."""
        try:
            self.read(index)
        except AttributeError:
            return False
        return True


def _mangle(cls: type, name: str) -> str:
    """Apply private name mangling the way the class body compiler does."""
    if not name.startswith("__") or name.endswith("__"):
        return name
    owner = cls.__name__.lstrip("_")
    return f"_{owner}{name}" if owner else name


def _own_slots(cls: type) -> list[str]:
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return [_mangle(cls, s) for s in slots if s not in _IGNORED_SLOTS]


def _is_classvar(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return _CLASSVAR_PATTERN.match(annotation) is not None
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def _is_initvar(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return _INITVAR_PATTERN.match(annotation) is not None
    return annotation is dataclasses.InitVar or isinstance(annotation, dataclasses.InitVar)


def _declared_fields(cls: type) -> list[tuple[str, bool]]:
    """Return (name, is_static) for every field declared directly on `cls`."""
    try:
        annotations = inspect.get_annotations(cls)
    except Exception as e:
        raise IntrospectionError(f"Cannot read annotations of {cls.__qualname__}") from e

    declared: list[tuple[str, bool]] = []
    seen: set[str] = set()
    for name, annotation in annotations.items():
        if _is_initvar(annotation):
            continue
        declared.append((name, _is_classvar(annotation)))
        seen.add(name)
    for name in _own_slots(cls):
        if name not in seen:
            declared.append((name, False))
            seen.add(name)
    return declared


def build_accessor_set(cls: type) -> FieldAccessorSet:
    """Introspect the fields of `cls`.

    Fields declared directly on `cls` come first: own annotations in
    declaration order, then own `__slots__` entries that carry no annotation.
    They are followed by public instance fields inherited from ancestors
    (nearest ancestor first, `object` excluded), so that a copy starting at
    `cls` covers public fields anywhere in the chain. Non-public inherited
    fields are left to the ancestors' own accessor sets.

    Only annotated and slotted attributes are fields. Attributes a plain class
    assigns in `__init__` without an annotation are not seen, so such a class
    yields an empty accessor set.

    Args:
        cls: Class to introspect.

    Returns:
        Accessor set with no bound instance.

    Raises:
        IntrospectionError: If `cls` is not a class or its annotations cannot be read.
    """
    if not isinstance(cls, type):
        raise IntrospectionError(f"Expected a class, got {type(cls).__name__}")

    collected: list[tuple[str, type, bool]] = []
    seen: set[str] = set()
    for name, is_static in _declared_fields(cls):
        collected.append((name, cls, is_static))
        seen.add(name)

    for ancestor in cls.__mro__[1:]:
        if ancestor is object:
            continue
        for name, is_static in _declared_fields(ancestor):
            # Nearest declaration wins when a name is shadowed
            if is_static or name.startswith("_") or name in seen:
                continue
            collected.append((name, ancestor, False))
            seen.add(name)

    fields = tuple(
        FieldSpec(
            index=index,
            name=name,
            declaring_type=declaring_type,
            is_static=is_static,
            is_public=not name.startswith("_"),
        )
        for index, (name, declaring_type, is_static) in enumerate(collected)
    )
    return FieldAccessorSet(cls, fields)
