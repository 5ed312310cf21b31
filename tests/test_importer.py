from sqlalchemy.orm import Session

from aisc_shapes import (
    HollowStructuralSection,
    Pipe,
    RoundHollowStructuralSection,
    WideFlange,
)
from factories import aisc_csv, csv_cells, shape_row
from import_engine import row_processor, run_import
from import_engine.field_map import COLUMN_INDEX
from repositories import repository_for


def _w(edi, **kw):
    return csv_cells("W", shape_row(WideFlange, edi_std_nomenclature=edi, **kw))


def test_imports_each_row_into_its_table(db_url):
    content = aisc_csv(
        _w("W14X22", d_lower=13.7),
        csv_cells("PIPE", shape_row(Pipe, edi_std_nomenclature="Pipe2STD", od=2.38)),
        csv_cells("HSS", shape_row(HollowStructuralSection, edi_std_nomenclature="HSS6X4X1/4")),
        csv_cells("HSS", shape_row(RoundHollowStructuralSection,
                                   edi_std_nomenclature="HSS6.625X0.250")),
    )
    report = run_import(content.encode("utf-8"))

    assert report.errors == []
    assert report.imported == report.total_rows == 4
    assert report.by_shape == {
        "wide_flanges": 1,
        "pipes": 1,
        "hollow_structural_sections": 1,
        "round_hollow_structural_sections": 1,
    }
    w = repository_for(WideFlange).shape_with_edi_std_nomenclature("W14X22")
    assert w.d_lower == 13.7
    assert w.t_f is False
    assert w.wgo is None
    assert repository_for(Pipe).shapes_with_diameter(2.38)[0].edi_std_nomenclature == "Pipe2STD"


def test_fractional_cells(db_url):
    cells = _w("W8X10")
    cells[COLUMN_INDEX["kdet"]] = "1 1/16"
    cells[COLUMN_INDEX["twdet_2"]] = "3/16"
    report = run_import(aisc_csv(cells))
    assert report.imported == 1
    shape = repository_for(WideFlange).shape_with_edi_std_nomenclature("W8X10")
    assert shape.kdet == 1.0625
    assert shape.twdet_2 == 0.1875


def test_missing_required_cell_skips_only_that_row(db_url):
    bad = _w("W8X13")
    bad[COLUMN_INDEX["tw"]] = "–"
    report = run_import(aisc_csv(_w("W8X10"), bad, _w("W8X15")))

    assert report.imported == 2
    assert report.skipped == 1
    assert report.errors[0]["row"] == 3
    assert report.errors[0]["reason"] == (
        "WideFlange W8X13: The required property tw was missing."
    )
    assert len(repository_for(WideFlange).all()) == 2


def test_bad_number_is_reported_by_label(db_url):
    cells = _w("W8X10")
    cells[COLUMN_INDEX["bf_2tf"]] = "n/a"
    report = run_import(aisc_csv(cells))
    assert report.imported == 0
    assert report.errors[0]["reason"].startswith("Bad value for bf/2tf")


def test_unsupported_type_and_short_rows(db_url):
    report = run_import(aisc_csv(["XYZ", "XYZ1"] + ["–"] * 82, ["W", "W8X10"]))
    assert report.imported == 0
    assert report.skipped == 2
    assert "Unsupported shape type 'XYZ'" in report.errors[0]["reason"]
    assert "Expected at least 84 columns" in report.errors[1]["reason"]


def test_blank_lines_are_ignored(db_url):
    report = run_import(aisc_csv(_w("W8X10"), [], _w("W8X15")))
    assert report.total_rows == 2
    assert report.imported == 2


def test_duplicates_are_skipped_unless_replacing(db_url):
    run_import(aisc_csv(_w("W8X10", d_lower=7.89)))

    again = run_import(aisc_csv(_w("W8X10", d_lower=7.9)))
    assert again.imported == 0
    assert "Duplicate WideFlange W8X10" in again.errors[0]["reason"]

    replaced = run_import(aisc_csv(_w("W8X10", d_lower=7.9)), replace_existing=True)
    assert replaced.imported == 1
    repo = repository_for(WideFlange)
    assert len(repo.all()) == 1
    assert repo.shape_with_edi_std_nomenclature("W8X10").d_lower == 7.9


def test_wrong_header_is_rejected(db_url):
    report = run_import("Name,Value\nfoo,1\n")
    assert report.imported == 0
    assert report.errors[0]["row"] == 1
    assert "Not an AISC shapes CSV" in report.errors[0]["reason"]


def test_empty_content(db_url):
    report = run_import(b"")
    assert report.errors == [{"row": 0, "reason": "CSV has no header row or is empty"}]


def test_report_to_dict_caps_errors(db_url):
    lines = [["XYZ", f"XYZ{i}"] + ["–"] * 82 for i in range(5)]
    report = run_import(aisc_csv(*lines))
    assert not report.ok
    assert report.summary() == "0 imported, 5 skipped / 5 rows"
    d = report.to_dict(max_errors=2)
    assert d["skipped"] == 5
    assert len(d["errors"]) == 2
    assert d["errors_truncated"] == 3


def test_non_finite_number_skips_only_that_row(db_url):
    bad = _w("W8X13")
    bad[COLUMN_INDEX["tw"]] = "nan"
    report = run_import(aisc_csv(_w("W8X10"), bad, _w("W8X15")))

    assert report.imported == 2
    assert report.errors == [{"row": 3, "reason": "Bad value for tw: 'nan'"}]
    assert len(repository_for(WideFlange).all()) == 2


def test_failed_insert_rolls_back_only_that_row(db_url, monkeypatch):
    # let NaN through parsing so the NOT NULL column rejects it at INSERT
    monkeypatch.setitem(
        row_processor._PARSERS, float,
        lambda raw: None if raw.strip() == "–" else float(raw),
    )
    bad = _w("W8X13")
    bad[COLUMN_INDEX["tw"]] = "nan"
    report = run_import(aisc_csv(_w("W8X10"), bad, _w("W8X15")))

    assert report.imported == 2
    assert report.by_shape == {"wide_flanges": 2}
    assert report.errors[0]["row"] == 3
    assert report.errors[0]["reason"].startswith("Unexpected:")
    names = sorted(s.edi_std_nomenclature for s in repository_for(WideFlange).all())
    assert names == ["W8X10", "W8X15"]


def test_failed_commit_reports_nothing_imported(db_url, monkeypatch):
    def _commit_fails(self):
        raise RuntimeError("disk full")

    monkeypatch.setattr(Session, "commit", _commit_fails)
    report = run_import(aisc_csv(_w("W8X10"), _w("W8X15")))
    monkeypatch.undo()

    assert report.total_rows == 2
    assert report.imported == 0
    assert report.by_shape == {}
    assert report.errors == [{"row": 0, "reason": "Fatal import error: disk full"}]
    assert repository_for(WideFlange).all() == []
