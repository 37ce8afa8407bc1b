import io

from gedcom_validator.reporting import Reporter
from gedcom_validator.rules import (
    birth_before_death,
    birth_before_marriage_of_parent,
    male_last_name,
    marriage_before_divorce,
    unique_families_by_spouses,
)
from gedcom_validator.store import Family, Individual, RecordStore


def report_text(findings) -> str:
    sink = io.StringIO()
    Reporter(sink).report_all(findings)
    return sink.getvalue()


# ---------------------------------------------------------------------------
# US03 Birth Before Death
# ---------------------------------------------------------------------------

def test_birth_before_death():
    store = RecordStore(
        [
            Individual("I1", birth="01/01/1990", death="01/01/2000"),
            Individual("I2", birth="01/01/2000", death="01/01/1990"),
        ]
    )

    findings = birth_before_death(store)

    assert [f.entity_ids for f in findings] == [("I2",)]
    assert findings[0].dates == ("01/01/2000", "01/01/1990")
    assert report_text(findings) == (
        "ERROR:INDIVIDUAL: User Story US03: Birth Before Death \n"
        "Individual: I2 - null was born after death\n"
        "DOB: 01/01/2000 DOD: 01/01/1990\n"
        "\n"
    )


def test_birth_before_death_skips_missing_and_equal_dates():
    store = RecordStore(
        [
            Individual("I1", birth="01/01/2000"),
            Individual("I2", death="01/01/1990"),
            Individual("I3", birth="05/05/1950", death="05/05/1950"),
            Individual("I4", birth="ABT 2000", death="01/01/1990"),
        ]
    )
    assert birth_before_death(store) == []


def test_birth_before_death_renders_name():
    store = RecordStore([Individual("I7", name="Ann Lee", birth="02/02/1902", death="01/01/1901")])
    assert "Individual: I7 - Ann Lee was born after death\n" in report_text(birth_before_death(store))


# ---------------------------------------------------------------------------
# US04 Marriage Before Divorce
# ---------------------------------------------------------------------------

def test_marriage_before_divorce():
    store = RecordStore(
        [Individual("I1"), Individual("I2")],
        [
            Family(
                "F1",
                husband_id="I1",
                wife_id="I2",
                marriage_date="01/01/2000",
                divorce_date="01/01/1990",
            )
        ],
    )

    assert report_text(marriage_before_divorce(store)) == (
        "ERROR:FAMILY: User Story US04: Marriage Before Divorce \n"
        "Family: F1\n"
        "Individual: I1: nullI2: null marriage date is before divorce date.\n"
        "Marriage Date: 01/01/2000 Divorce Date: 01/01/1990\n"
        "\n"
    )


def test_marriage_before_divorce_ordered_or_incomplete_is_clean():
    store = RecordStore(
        [],
        [
            Family("F1", marriage_date="01/01/1990", divorce_date="01/01/2000"),
            Family("F2", marriage_date="01/01/1990"),
            Family("F3", divorce_date="01/01/1990"),
        ],
    )
    assert marriage_before_divorce(store) == []


def test_marriage_before_divorce_tolerates_dangling_spouse():
    store = RecordStore(
        [Individual("I1", name="John Doe")],
        [Family("F1", husband_id="I1", wife_id="I9", marriage_date="01/01/2000", divorce_date="01/01/1990")],
    )
    text = report_text(marriage_before_divorce(store, placeholder="unknown"))
    assert "Individual: I1: John DoeI9: unknown marriage date is before divorce date.\n" in text


# ---------------------------------------------------------------------------
# US08 Birth Before Marriage Of Parent
# ---------------------------------------------------------------------------

def test_birth_before_marriage_of_parent():
    store = RecordStore(
        [Individual("I1"), Individual("I2"), Individual("I3", birth="01/01/1980")],
        [Family("F1", husband_id="I1", wife_id="I2", marriage_date="01/01/1990", children=["I3"])],
    )

    assert report_text(birth_before_marriage_of_parent(store)) == (
        "ERROR: User Story US08: Birth Before Marriage Date \n"
        "Family ID: F1\n"
        "Individual: I3: null Has been born before parents' marriage\n"
        "DOB: 01/01/1980 Parents Marriage Date: 01/01/1990\n"
        "\n"
        "\n"
    )


def test_birth_before_marriage_of_parent_only_flags_earlier_births():
    store = RecordStore(
        [
            Individual("I3", birth="01/01/1995"),
            Individual("I4", birth="01/01/1990"),
            Individual("I5"),
            Individual("I6", birth="06/01/1989"),
        ],
        [
            Family("F1", marriage_date="01/01/1990", children=["I3", "I4", "I5", "I6", "I99"]),
            Family("F2", children=["I6"]),
        ],
    )

    findings = birth_before_marriage_of_parent(store)

    assert [f.entity_ids for f in findings] == [("F1", "I6")]


# ---------------------------------------------------------------------------
# US16 Male last name
# ---------------------------------------------------------------------------

US16_BLOCK = (
    "ERROR: User Story US16:Male last name \n"
    "Family ID: F1   family members don't have same last name \n"
    "\n"
    "\n"
)


def _doe_family(*children):
    father = Individual("I1", name="John Doe", sex="male")
    return RecordStore(
        [father, *children],
        [Family("F1", husband_id="I1", children=[c.id for c in children])],
    )


def test_male_last_name_one_finding_per_mismatching_son():
    store = _doe_family(
        Individual("I2", name="Jake Doe", sex="male"),
        Individual("I3", name="Mike Deo", sex="male"),
        Individual("I4", name="Drake Doie", sex="male"),
    )

    findings = male_last_name(store)

    assert [f.fields["child_id"] for f in findings] == ["I3", "I4"]
    assert report_text(findings) == US16_BLOCK * 2


def test_male_last_name_ignores_daughters():
    store = RecordStore(
        [
            Individual("I1", name="John Doie", sex="male"),
            Individual("I2", name="Jake Doe", sex="male"),
            Individual("I3", name="Jane Doe", sex="female"),
        ],
        [Family("F1", husband_id="I1", children=["I2", "I3"])],
    )

    assert report_text(male_last_name(store)) == US16_BLOCK


def test_male_last_name_matching_family_is_clean():
    store = _doe_family(
        Individual("I2", name="Jake Doe", sex="male"),
        Individual("I3", name="Jane Smith", sex="female"),
        Individual("I4", sex="male"),
    )
    assert male_last_name(store) == []


def test_male_last_name_without_husband_name():
    store = RecordStore(
        [Individual("I1", sex="male"), Individual("I2", name="Jake Doe", sex="male")],
        [
            Family("F1", husband_id="I1", children=["I2"]),
            Family("F2", children=["I2"]),
        ],
    )

    findings = male_last_name(store)

    assert [f.fields["family_id"] for f in findings] == ["F1", "F2"]
    assert findings[0].fields["expected_surname"] is None


# ---------------------------------------------------------------------------
# US24 Unique Families By Spouse
# ---------------------------------------------------------------------------

def test_unique_families_by_spouses():
    store = RecordStore(
        [Individual("I1"), Individual("I2")],
        [
            Family("F1", husband_id="I1", wife_id="I2", marriage_date="01/01/1990"),
            Family("F2", husband_id="I1", wife_id="I2", marriage_date="01/01/1990"),
        ],
    )

    findings = unique_families_by_spouses(store)

    assert [f.entity_ids for f in findings] == [("F2", "F1"), ("F1", "F2")]
    assert report_text(findings) == (
        "ERROR: User Story US24: Unique Families By Spouse :\n"
        "F2: Husbund Name: null,Wife Name: null and F1: Husbund Name: null,Wife Name: null\n"
        " have same spouses and marriage dates :01/01/1990\n"
        "\n"
        "ERROR: User Story US24: Unique Families By Spouse :\n"
        "F1: Husbund Name: null,Wife Name: null and F2: Husbund Name: null,Wife Name: null\n"
        " have same spouses and marriage dates :01/01/1990\n"
        "\n"
    )


def test_unique_families_by_spouses_needs_all_three_equal():
    store = RecordStore(
        [],
        [
            Family("F1", husband_id="I1", wife_id="I2", marriage_date="01/01/1990"),
            Family("F2", husband_id="I1", wife_id="I2", marriage_date="02/01/1990"),
            Family("F3", husband_id="I1", wife_id="I3", marriage_date="01/01/1990"),
            Family("F4", husband_id="I4", wife_id="I2", marriage_date="01/01/1990"),
            Family("F5", husband_id="I1", wife_id="I2"),
            Family("F6", husband_id="I1", wife_id="I2"),
        ],
    )
    assert unique_families_by_spouses(store) == []


def test_unique_families_by_spouses_three_way_duplicate():
    fams = [
        Family(f"F{i}", husband_id="I1", wife_id="I2", marriage_date="01/01/1990")
        for i in (1, 2, 3)
    ]
    findings = unique_families_by_spouses(RecordStore([], fams))
    assert len(findings) == 6
    assert sorted(f.entity_ids for f in findings) == sorted(
        [("F2", "F1"), ("F3", "F1"), ("F1", "F2"), ("F3", "F2"), ("F1", "F3"), ("F2", "F3")]
    )


def test_rules_are_idempotent():
    store = _doe_family(Individual("I2", name="Jake Roe", sex="male", birth="01/01/2000", death="01/01/1999"))
    for rule in (birth_before_death, male_last_name):
        assert report_text(rule(store)) == report_text(rule(store))
