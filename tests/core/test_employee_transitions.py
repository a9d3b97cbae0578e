"""Employee Transitions — tests for pure record state changes.

Tests cover:
    - new_employee defaults (owner, unrated, not transferable, timestamps)
    - each transition bumps updated_at and returns a new record
    - id and created_at survive every transition
    - transfer_to keeps the transferable flag
    - owned_by filters without reordering
"""

import pytest
from dataclasses import FrozenInstanceError

from ems.core.domain_types import EmployeeId, Rating
from ems.core.employee_transitions import (
    new_employee, assign_rating, flip_transferable, transfer_to, owned_by,
)
from tests.core.helpers import make_record, OWNER, OTHER, T0, T1


def test_new_employee_defaults():
    record = new_employee(EmployeeId(5), "Ada", "ada@example.com", OWNER, T0)
    assert record.id == 5
    assert record.employer_id == OWNER
    assert record.rating is None
    assert record.transferable is False
    assert record.created_at == T0
    assert record.updated_at == T0


def test_new_employee_keeps_text_as_given():
    record = new_employee(EmployeeId(1), " Ada ", "ada@x", OWNER, T0)
    assert record.name == " Ada "


def test_records_are_immutable():
    record = make_record()
    with pytest.raises(FrozenInstanceError):
        record.transferable = True  # type: ignore[misc]


def test_assign_rating_sets_value_and_timestamp():
    original = make_record()
    updated = assign_rating(original, Rating.EXCELLENT, T1)
    assert updated.rating == Rating.EXCELLENT
    assert updated.updated_at == T1
    assert original.rating is None


def test_flip_transferable_twice_restores_flag():
    original = make_record()
    once = flip_transferable(original, T1)
    twice = flip_transferable(once, T0)
    assert once.transferable is True
    assert twice.transferable is False


def test_transfer_to_changes_owner_but_keeps_transferable():
    record = make_record(transferable=True)
    moved = transfer_to(record, OTHER, T1)
    assert moved.employer_id == OTHER
    assert moved.transferable is True
    assert moved.updated_at == T1


def test_transitions_never_touch_identity_or_creation_time():
    record = make_record(transferable=True)
    for changed in (
        assign_rating(record, Rating.POOR, T1),
        flip_transferable(record, T1),
        transfer_to(record, OTHER, T1),
    ):
        assert changed.id == record.id
        assert changed.created_at == record.created_at


def test_owned_by_filters_preserving_order():
    records = [
        make_record(id=EmployeeId(1)),
        make_record(id=EmployeeId(2), employer_id=OTHER),
        make_record(id=EmployeeId(3)),
    ]
    assert [r.id for r in owned_by(records, OWNER)] == [1, 3]
    assert owned_by([], OWNER) == []
