from __future__ import annotations

import pytest

from atomic_change.domain import UnsupportedTargetError
from atomic_change.domain.state import ensure_supported, overwrite, working_copy
from atomic_change.record import Record
from tests.helpers.records import Lazy, Profile, SlottedAccount


def test_working_copy_does_not_alias_nested_state() -> None:
    account = SlottedAccount(owner="ada", tags=["vip"])

    draft = working_copy(account)
    draft.tags.append("new")

    assert account.tags == ["vip"]
    assert draft is not account


def test_overwrite_keeps_target_identity(seeded_record: Record) -> None:
    alias = seeded_record
    draft = working_copy(seeded_record)
    draft.position = "Lead"
    draft.set_name("Ada")

    overwrite(seeded_record, draft)

    assert alias is seeded_record
    assert seeded_record.position == "Lead"
    assert seeded_record.name == "Ada"
    assert seeded_record.age == 30


def test_overwrite_slotted_dataclass() -> None:
    account = SlottedAccount(owner="ada", balance=10)
    draft = working_copy(account)
    draft.deposit(5)

    overwrite(account, draft)

    assert account.balance == 15


def test_overwrite_clears_slots_unset_on_source() -> None:
    target = Lazy()
    target.late = "stale"
    source = Lazy()

    overwrite(target, source)

    assert target.ready is True
    assert not hasattr(target, "late")


def test_overwrite_pydantic_model_including_private_state() -> None:
    profile = Profile(handle="ada")
    draft = working_copy(profile)
    draft.follow(3)
    draft.links.append("https://example.org")

    overwrite(profile, draft)

    assert profile.followers == 3
    assert profile.links == ["https://example.org"]
    assert profile.audit == ["follow:3"]
    assert "followers" in profile.model_fields_set


@pytest.mark.parametrize(
    ("target", "changed"),
    [
        ({"a": 1}, {"b": 2}),
        ([1, 2, 3], [4]),
        ({1, 2}, {3}),
        (bytearray(b"ab"), bytearray(b"xyz")),
    ],
)
def test_overwrite_builtin_containers_in_place(target: object, changed: object) -> None:
    identity = id(target)

    overwrite(target, changed)

    assert target == changed
    assert id(target) == identity


@pytest.mark.parametrize("target", [1, "text", (1, 2), frozenset({1}), None])
def test_immutable_targets_are_rejected(target: object) -> None:
    with pytest.raises(UnsupportedTargetError):
        ensure_supported(target)
