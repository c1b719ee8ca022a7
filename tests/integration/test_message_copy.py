"""End-to-end journeys: copying family members through delegated accessors."""

from dataclasses import dataclass, field

import pytest

from structcopy import (
    AccessorCache,
    FamilyRegistry,
    ObjectWriter,
    StructureRegistry,
    WriterSettings,
    transfer_deep,
)


class Packet:
    pass


packets = FamilyRegistry(Packet)


@dataclass
class Envelope(Packet):
    channel: int = 0
    _trace: list[str] = field(default_factory=list)


@packets.member
@dataclass
class ChatMessage(Envelope):
    text: str = ""
    _mentions: list[str] = field(default_factory=list)


@dataclass
class DraftMessage(Envelope):
    text: str = ""


@pytest.fixture
def structures():
    return StructureRegistry(packets)


@pytest.fixture
def delegating_writer(structures):
    cache = AccessorCache(family=packets, structures=structures)
    return ObjectWriter(cache=cache, settings=WriterSettings(_env_file=None))


def test_member_copied_through_structure_registry(delegating_writer, structures):
    source = ChatMessage(channel=2, _trace=["relay"], text="hi", _mentions=["bob"])
    destination = ChatMessage()

    delegating_writer.copy_to(source, destination, ChatMessage)

    assert destination == source
    assert len(structures) == 1
    assert not delegating_writer.cache.is_cached(ChatMessage)
    # Envelope is not a registered member, so its level is cached locally
    assert delegating_writer.cache.is_cached(Envelope)


def test_unregistered_member_copied_through_local_cache(delegating_writer, structures):
    source = DraftMessage(channel=5, _trace=["draft"], text="wip")
    destination = DraftMessage()

    delegating_writer.copy_to(source, destination, DraftMessage)

    assert destination == source
    assert len(structures) == 0
    assert delegating_writer.cache.is_cached(DraftMessage)


def test_deep_clone_of_member(structures):
    cache = AccessorCache(family=packets, structures=structures)
    writer = ObjectWriter(cache=cache, transfer=transfer_deep, settings=WriterSettings(_env_file=None))
    source = ChatMessage(channel=1, _trace=["a"], text="yo", _mentions=["cy"])

    copy = writer.clone(source)

    assert copy == source
    assert copy._mentions is not source._mentions
    assert copy._trace is not source._trace
