# topmark:header:start
#
#   project      : CmdParser
#   file         : test_slots.py
#   file_relpath : tests/core/test_slots.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for result slots."""

from __future__ import annotations

from cmdparser.core.slots import FlagSlot, ValueSlot, slot_for


def test_flag_slot_set_and_truthiness() -> None:
    """A flag slot starts unset, is falsy, and becomes truthy once set."""
    slot = FlagSlot()
    assert not slot

    slot.set()
    assert slot
    assert slot.value is True


def test_value_slot_store_replaces() -> None:
    """Storing a value replaces the previous one."""
    slot = ValueSlot()
    slot.store("a")
    slot.store("b")

    assert slot.value == "b"


def test_slot_for_matches_arity() -> None:
    """`slot_for` returns a fresh slot of the right variant."""
    assert isinstance(slot_for(False), FlagSlot)
    assert isinstance(slot_for(True), ValueSlot)
    assert slot_for(True) is not slot_for(True)
