"""Tests for the generic and keyed repositories.

Covers insertion order, snapshot independence, absence signalling in both
variants, duplicate rejection and quantity updates.
"""

from dataclasses import dataclass

import pytest

from recordbook.exceptions import DuplicateKeyError, InvalidQuantityError, NotFoundError
from recordbook.repository import InventoryRepository, KeyedRepository, Repository


@dataclass
class Thing:
    id: int
    name: str


@dataclass
class Crate:
    id: int
    name: str
    quantity: int


def make_repo(*things):
    repo = Repository()
    for t in things:
        repo.add(t)
    return repo


def make_keyed(*crates):
    repo = InventoryRepository()
    for c in crates:
        repo.add(c)
    return repo


# ===========================================================================
# Generic repository
# ===========================================================================

def test_get_all_preserves_insertion_order():
    things = [Thing(3, "c"), Thing(1, "a"), Thing(2, "b")]
    repo = make_repo(*things)
    assert repo.get_all() == things


def test_get_all_returns_independent_copy():
    repo = make_repo(Thing(1, "a"))
    snapshot = repo.get_all()
    snapshot.append(Thing(2, "b"))
    snapshot.clear()
    assert len(repo) == 1


def test_generic_allows_duplicate_ids():
    repo = make_repo(Thing(1, "first"), Thing(1, "second"))
    assert len(repo) == 2
    # First match wins
    assert repo.get_by_id(1).name == "first"


def test_generic_lookup_miss_returns_none():
    repo = make_repo(Thing(1, "a"))
    assert repo.get_by_id(99) is None
    assert repo.find(lambda t: t.name == "zzz") is None


def test_find_by_predicate():
    repo = make_repo(Thing(1, "apple"), Thing(2, "banana"), Thing(3, "blueberry"))
    found = repo.find(lambda t: t.name.startswith("b"))
    assert found.id == 2


def test_remove_where_removes_first_match_only():
    repo = make_repo(Thing(1, "x"), Thing(2, "x"), Thing(3, "y"))
    assert repo.remove_where(lambda t: t.name == "x") is True
    assert [t.id for t in repo.get_all()] == [2, 3]


def test_remove_by_id_reports_miss():
    repo = make_repo(Thing(1, "a"))
    assert repo.remove_by_id(42) is False
    assert repo.remove_by_id(1) is True
    assert repo.get_all() == []


def test_iteration_and_clear():
    repo = make_repo(Thing(1, "a"), Thing(2, "b"))
    assert [t.id for t in repo] == [1, 2]
    repo.clear()
    assert len(repo) == 0


# ===========================================================================
# Keyed repository
# ===========================================================================

def test_keyed_preserves_insertion_order():
    repo = make_keyed(Crate(5, "e", 1), Crate(2, "b", 1), Crate(9, "i", 1))
    assert [c.id for c in repo.get_all()] == [5, 2, 9]


def test_duplicate_key_rejected_and_contents_unchanged():
    original = Crate(1, "Laptop", 10)
    repo = make_keyed(original)

    with pytest.raises(DuplicateKeyError):
        repo.add(Crate(1, "Impostor", 99))

    assert repo.get_all() == [original]
    assert repo.get_by_id(1).name == "Laptop"


def test_keyed_get_by_id_miss_raises():
    repo = make_keyed(Crate(1, "a", 1))
    with pytest.raises(NotFoundError):
        repo.get_by_id(2)


def test_not_found_is_a_key_error():
    repo = KeyedRepository()
    with pytest.raises(KeyError):
        repo.get_by_id(7)


def test_not_found_message_is_readable():
    repo = KeyedRepository()
    with pytest.raises(NotFoundError) as exc:
        repo.remove(7)
    assert str(exc.value) == "Item with ID 7 not found"


def test_keyed_find_miss_raises():
    repo = make_keyed(Crate(1, "a", 1))
    assert repo.find(lambda c: c.name == "a").id == 1
    with pytest.raises(NotFoundError):
        repo.find(lambda c: c.name == "b")


def test_keyed_remove_present_removes_exactly_one():
    repo = make_keyed(Crate(1, "a", 1), Crate(2, "b", 1), Crate(3, "c", 1))
    repo.remove(2)
    assert [c.id for c in repo.get_all()] == [1, 3]
    assert 2 not in repo


def test_keyed_remove_absent_raises():
    repo = make_keyed(Crate(1, "a", 1))
    with pytest.raises(NotFoundError):
        repo.remove(2)
    assert len(repo) == 1


def test_readd_after_remove_is_allowed():
    repo = make_keyed(Crate(1, "a", 1))
    repo.remove(1)
    repo.add(Crate(1, "a again", 2))
    assert repo.get_by_id(1).name == "a again"


# ===========================================================================
# Quantity updates
# ===========================================================================

def test_update_quantity_mutates_in_place():
    crate = Crate(1, "Rice", 30)
    repo = make_keyed(crate)
    repo.update_quantity(1, 45)
    assert crate.quantity == 45
    assert repo.get_by_id(1).quantity == 45


def test_update_quantity_to_zero_is_valid():
    repo = make_keyed(Crate(1, "Rice", 30))
    repo.update_quantity(1, 0)
    assert repo.get_by_id(1).quantity == 0


def test_negative_quantity_rejected_and_unchanged():
    repo = make_keyed(Crate(1, "Rice", 30))
    with pytest.raises(InvalidQuantityError):
        repo.update_quantity(1, -1)
    assert repo.get_by_id(1).quantity == 30


def test_negative_quantity_checked_before_lookup():
    repo = make_keyed()
    with pytest.raises(InvalidQuantityError):
        repo.update_quantity(404, -5)


def test_update_quantity_unknown_id_raises():
    repo = make_keyed(Crate(1, "Rice", 30))
    with pytest.raises(NotFoundError):
        repo.update_quantity(2, 10)


def test_invalid_quantity_is_a_value_error():
    repo = make_keyed(Crate(1, "Rice", 30))
    with pytest.raises(ValueError):
        repo.update_quantity(1, -3)
