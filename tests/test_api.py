import io

import pytest

from aisc_shapes import VARIANTS, HollowStructuralSection, Pipe, WideFlange
from factories import aisc_csv, csv_cells, shape_row
from repositories import memory_repository_for


@pytest.fixture
def seeded(client):
    content = aisc_csv(
        csv_cells("W", shape_row(WideFlange, edi_std_nomenclature="W14X22", d_lower=13.7)),
        csv_cells("W", shape_row(WideFlange, edi_std_nomenclature="W8X10", d_lower=8.0)),
        csv_cells("PIPE", shape_row(Pipe, edi_std_nomenclature="Pipe2STD", od=2.38)),
        csv_cells("HSS", shape_row(HollowStructuralSection, edi_std_nomenclature="HSS6X4X1/4")),
    )
    r = client.post("/api/v1/import", data=content, content_type="text/csv")
    assert r.status_code == 200
    assert r.get_json()["imported"] == 4
    return client


def test_list_kinds(client):
    r = client.get("/api/v1/shapes")
    assert r.status_code == 200
    kinds = r.get_json()
    assert len(kinds) == len(VARIANTS)
    assert kinds[0]["kind"] == "wide_flanges"


def test_list_collection(seeded):
    data = seeded.get("/api/v1/shapes/wide_flanges").get_json()
    assert data["total"] == 2


def test_filter_by_depth(seeded):
    data = seeded.get("/api/v1/shapes/wide_flanges?depth=13.7").get_json()
    assert data["total"] == 1
    assert data["shapes"][0]["edi_std_nomenclature"] == "W14X22"
    assert data["shapes"][0]["wgo"] is None


def test_filter_by_diameter(seeded):
    data = seeded.get("/api/v1/shapes/pipes?diameter=2.38").get_json()
    assert [s["edi_std_nomenclature"] for s in data["shapes"]] == ["Pipe2STD"]


def test_lookup_by_edi_with_slash(seeded):
    r = seeded.get("/api/v1/shapes/hollow_structural_sections/edi/HSS6X4X1/4")
    assert r.status_code == 200
    assert r.get_json()["aisc_manual_label"] == "HSS6X4X1/4"


def test_lookup_by_label(seeded):
    r = seeded.get("/api/v1/shapes/wide_flanges/label/W8X10")
    assert r.get_json()["d_lower"] == 8.0


def test_lookup_miss_is_404(seeded):
    r = seeded.get("/api/v1/shapes/wide_flanges/edi/W99X999")
    assert r.status_code == 404
    assert r.get_json()["error"] == "not found"


def test_unknown_kind_is_404(client):
    assert client.get("/api/v1/shapes/zees").status_code == 404


@pytest.mark.parametrize("url", [
    "/api/v1/shapes/wide_flanges?depth=8&width=4",
    "/api/v1/shapes/wide_flanges?diameter=2.38",
    "/api/v1/shapes/pipes?depth=2.38",
    "/api/v1/shapes/wide_flanges?depth=deep",
])
def test_bad_filters_are_400(client, url):
    r = client.get(url)
    assert r.status_code == 400
    assert r.get_json()["error"] == "bad request"


def test_incomplete_stored_shape_is_500(client, monkeypatch):
    bad = shape_row(WideFlange)
    del bad["ix"]
    monkeypatch.setattr(
        "api.routes_shapes.repository_for",
        lambda variant: memory_repository_for(variant, [shape_row(variant), bad]),
    )
    r = client.get("/api/v1/shapes/wide_flanges")
    assert r.status_code == 500
    assert r.get_json()["property"] == "ix"


def test_import_multipart(client):
    content = aisc_csv(csv_cells("W", shape_row(WideFlange, edi_std_nomenclature="W8X10")))
    r = client.post(
        "/api/v1/import?replace=1",
        data={"csv_file": (io.BytesIO(content.encode("utf-8")), "shapes.csv")},
        content_type="multipart/form-data",
    )
    assert r.status_code == 200
    assert r.get_json()["by_shape"] == {"wide_flanges": 1}


def test_import_columns(client):
    columns = client.get("/api/v1/import/columns").get_json()
    assert len(columns) == 84
    assert columns[:2] == ["Type", "EDI_Std_Nomenclature"]


def test_import_rejects_empty_uploads(client):
    assert client.post("/api/v1/import", data=b"", content_type="text/csv").status_code == 400
    r = client.post("/api/v1/import", data={}, content_type="multipart/form-data")
    assert r.status_code == 400


def test_count_shapes_spans_every_table(seeded):
    from main import count_shapes
    assert count_shapes() == 4
