import dataclasses

import pytest

from gedcom_validator.core.exceptions import RecordNotFoundError
from gedcom_validator.store import Family, Individual, RecordStore, surname_of


def make_store():
    return RecordStore(
        [Individual("I1", name="John Doe", sex="male"), Individual("I2")],
        [Family("F1", husband_id="I1", wife_id="I9", children=["I2", "I8"])],
    )


def test_surname_of():
    assert surname_of("John Doe") == "Doe"
    assert surname_of("Mary Ann  Smith ") == "Smith"
    assert surname_of("Cher") == "Cher"
    assert surname_of(None) is None
    assert surname_of("   ") is None


def test_records_are_immutable():
    store = make_store()
    with pytest.raises(dataclasses.FrozenInstanceError):
        store.individuals["I1"].name = "Other"
    with pytest.raises(TypeError):
        store.individuals["I3"] = Individual("I3")
    assert store.families["F1"].children == ("I2", "I8")


def test_store_preserves_insertion_order():
    store = RecordStore([Individual("I2"), Individual("I1"), Individual("I10")])
    assert list(store.individuals) == ["I2", "I1", "I10"]


def test_lookup_and_require():
    store = make_store()
    assert store.get_individual("I1").name == "John Doe"
    assert store.get_individual("I9") is None
    assert store.get_individual(None) is None
    assert store.contains_individual("I2")
    assert not store.contains_individual("I9")

    with pytest.raises(RecordNotFoundError):
        store.require_individual("I9")


def test_display_name_placeholders():
    store = make_store()
    assert store.display_name("I1", "null") == "John Doe"
    assert store.display_name("I2", "null") == "null"  # no name
    assert store.display_name("I9", "unknown") == "unknown"  # dangling
    assert store.display_name(None, "") == ""


def test_dangling_references():
    store = make_store()
    assert list(store.dangling_references()) == [("F1", "wife", "I9"), ("F1", "child", "I8")]


def test_from_maps():
    individuals = {"I1": Individual("I1")}
    families = {"F1": Family("F1")}
    store = RecordStore.from_maps(individuals, families)
    assert list(store.individuals) == ["I1"]
    assert list(store.families) == ["F1"]
