"""Tests for field accessor sets and the default provider."""

from dataclasses import InitVar, dataclass, field
from typing import ClassVar

import pytest

from structcopy import IntrospectionError, build_accessor_set


@dataclass
class Packet:
    kind: int
    payload: bytes = b""
    _sequence: int = 0
    MAX_SIZE: ClassVar[int] = 1024


@dataclass
class ChatPacket(Packet):
    message: str = ""
    _encrypted: bool = False


class Slotted:
    __slots__ = ("a", "_b", "__c", "__weakref__")

    def __init__(self) -> None:
        self.a = 1
        self._b = 2
        self.__c = 3


@dataclass(frozen=True, slots=True)
class FrozenPoint:
    x: int
    y: int


@dataclass
class WithInitVar:
    value: int
    seed: InitVar[int] = 0
    derived: int = field(init=False, default=0)

    def __post_init__(self, seed: int) -> None:
        self.derived = self.value + seed


def names(accessors):
    return [f.name for f in accessors.fields]


def test_fields_in_declaration_order():
    accessors = build_accessor_set(Packet)

    assert names(accessors) == ["kind", "payload", "_sequence", "MAX_SIZE"]
    assert [f.index for f in accessors.fields] == [0, 1, 2, 3]
    assert accessors.field_type is Packet


def test_public_and_static_flags():
    accessors = build_accessor_set(Packet)
    flags = {f.name: (f.is_public, f.is_static) for f in accessors.fields}

    assert flags["kind"] == (True, False)
    assert flags["_sequence"] == (False, False)
    assert flags["MAX_SIZE"] == (True, True)


def test_subclass_lists_own_fields_then_inherited_public():
    """Own fields first, then public fields of ancestors. Never inherited private fields.

    Why: Ancestor passes skip public fields, so the most-derived pass must
    cover them; inherited private fields belong to the ancestor's own pass.
    """
    accessors = build_accessor_set(ChatPacket)

    assert names(accessors) == ["message", "_encrypted", "kind", "payload"]
    declaring = {f.name: f.declaring_type for f in accessors.fields}
    assert declaring["message"] is ChatPacket
    assert declaring["kind"] is Packet


def test_shadowed_field_uses_nearest_declaration():
    @dataclass
    class Parent:
        value: int = 0

    @dataclass
    class Child(Parent):
        value: int = 1

    accessors = build_accessor_set(Child)

    assert names(accessors) == ["value"]
    assert accessors.get_field(0).declaring_type is Child


def test_slots_are_mangled_and_ignore_weakref():
    accessors = build_accessor_set(Slotted)

    assert names(accessors) == ["a", "_b", "_Slotted__c"]
    bound = accessors.with_target(Slotted())
    assert [bound.read(i) for i in range(bound.size())] == [1, 2, 3]


def test_slotted_dataclass_fields_not_duplicated():
    assert names(build_accessor_set(FrozenPoint)) == ["x", "y"]


def test_initvar_is_not_a_field():
    assert names(build_accessor_set(WithInitVar)) == ["value", "derived"]


def test_build_is_pure():
    """Building twice yields equal metadata in distinct objects."""
    first = build_accessor_set(Packet)
    second = build_accessor_set(Packet)

    assert first is not second
    assert first.fields == second.fields


def test_non_class_raises_introspection_error():
    with pytest.raises(IntrospectionError, match="Expected a class"):
        build_accessor_set(Packet(kind=1))  # type: ignore[arg-type]


def test_bound_accessor_reads_and_writes():
    accessors = build_accessor_set(Packet)
    packet = Packet(kind=7, payload=b"abc", _sequence=3)
    bound = accessors.with_target(packet)

    assert bound.read(0) == 7
    bound.write(1, b"xyz")

    assert packet.payload == b"xyz"
    assert bound.target is packet
    assert bound.accessors is accessors


def test_bound_accessor_writes_frozen_dataclass():
    point = FrozenPoint(1, 2)
    bound = build_accessor_set(FrozenPoint).with_target(point)

    bound.write(0, 10)

    assert point.x == 10


def test_static_field_reads_class_attribute():
    bound = build_accessor_set(Packet).with_target(Packet(kind=1))

    assert bound.read(3) == 1024


def test_is_set_detects_empty_slot():
    empty = Slotted.__new__(Slotted)
    bound = build_accessor_set(Slotted).with_target(empty)

    assert not bound.is_set(0)
    with pytest.raises(AttributeError):
        bound.read(0)


def test_bindings_are_independent():
    accessors = build_accessor_set(Packet)
    a = accessors.with_target(Packet(kind=1))
    b = accessors.with_target(Packet(kind=2))

    assert a is not b
    assert (a.read(0), b.read(0)) == (1, 2)


class Lookalikes:
    table: "ClassVarMap"  # noqa: F821
    spec: "InitVarSpec"  # noqa: F821
    limit: "ClassVar[int]" = 5
    bare: "typing.ClassVar" = 0  # noqa: F821


def test_string_annotations_match_classvar_and_initvar_exactly():
    """Type names that merely start with ClassVar or InitVar are ordinary fields."""
    flags = {f.name: f.is_static for f in build_accessor_set(Lookalikes).fields}

    assert flags == {"table": False, "spec": False, "limit": True, "bare": True}
