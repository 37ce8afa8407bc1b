from pathlib import Path

import pytest

from gedcom_validator.loader import (
    GedcomStructureError,
    GedcomSyntaxError,
    build_tree,
    load_record_store,
    tokenize_line,
    tokenize_lines,
)

DATA = Path(__file__).parent / "data" / "family.ged"


def test_tokenize_line_with_pointer():
    tok = tokenize_line("0 @I1@ INDI", lineno=3)
    assert (tok.lineno, tok.level, tok.pointer, tok.tag, tok.value) == (3, 0, "@I1@", "INDI", "")


def test_tokenize_line_with_value():
    tok = tokenize_line("1 NAME John /Doe/\r\n")
    assert tok.pointer is None
    assert tok.tag == "NAME"
    assert tok.value == "John /Doe/"


@pytest.mark.parametrize("line", ["X NAME", "1", "0 @I1@", "   "])
def test_tokenize_line_rejects_bad_syntax(line):
    with pytest.raises(GedcomSyntaxError):
        tokenize_line(line, lineno=1)


def test_build_tree_nests_and_folds_continuations():
    records = build_tree(
        tokenize_lines(
            [
                "0 @N1@ NOTE First",
                "1 CONC  line",
                "1 CONT Second",
                "0 @I1@ INDI",
                "1 BIRT",
                "2 DATE 1 JAN 1900",
            ]
        )
    )

    assert [r.tag for r in records] == ["NOTE", "INDI"]
    assert records[0].value == "First line\nSecond"
    assert records[0].children == []
    assert records[1].find_first("BIRT").child_value("DATE") == "1 JAN 1900"


def test_build_tree_rejects_level_jump():
    with pytest.raises(GedcomStructureError):
        build_tree(tokenize_lines(["0 @I1@ INDI", "2 DATE 1 JAN 1900"]))


def test_load_record_store():
    store = load_record_store(DATA)

    assert list(store.individuals) == ["@I1@", "@I2@", "@I3@", "@I4@"]
    john = store.individuals["@I1@"]
    assert john.name == "John Doe"
    assert john.sex == "male"
    assert john.birth == "01/01/1960"
    assert store.individuals["@I2@"].sex == "female"
    assert store.individuals["@I4@"].birth == "ABT 1995"

    fam = store.families["@F1@"]
    assert fam.husband_id == "@I1@"
    assert fam.wife_id == "@I2@"
    assert fam.children == ("@I3@", "@I4@")
    assert fam.marriage_date == "06/10/1985"
    assert fam.divorce_date == "01/01/1984"


def test_load_record_store_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_record_store(tmp_path / "missing.ged")
