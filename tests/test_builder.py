import pytest

from aisc_shapes import FIELDS, FieldTypeError, ShapeBuilder, UnknownFieldError


def test_new_builder_is_empty():
    builder = ShapeBuilder()
    assert len(builder) == 0
    assert builder.fields() == {}
    assert builder.get("d_lower") is None


def test_every_vocabulary_field_has_a_setter():
    builder = ShapeBuilder()
    for spec in FIELDS:
        assert callable(getattr(builder, f"with_{spec.name}"))


def test_setters_chain_and_accumulate():
    builder = (
        ShapeBuilder()
        .with_edi_std_nomenclature("W14X22")
        .with_aisc_manual_label("W14X22")
        .with_t_f(False)
        .with_d_lower(13.7)
    )
    assert builder.fields() == {
        "edi_std_nomenclature": "W14X22",
        "aisc_manual_label": "W14X22",
        "t_f": False,
        "d_lower": 13.7,
    }


def test_setting_twice_overwrites():
    builder = ShapeBuilder().with_bf(5.0).with_bf(5.5)
    assert builder.get("bf") == 5.5
    assert len(builder) == 1


def test_zero_is_a_value():
    builder = ShapeBuilder().with_wgo(0.0)
    assert builder.is_set("wgo")
    assert builder.get("wgo") == 0.0


def test_int_widens_to_float():
    builder = ShapeBuilder().with_ix(199)
    assert builder.get("ix") == 199.0
    assert isinstance(builder.get("ix"), float)


@pytest.mark.parametrize("value", [True, "13.7", None, [1.0]])
def test_numeric_setter_rejects_non_numbers(value):
    with pytest.raises(FieldTypeError) as exc:
        ShapeBuilder().with_d_lower(value)
    assert exc.value.field_name == "d_lower"


@pytest.mark.parametrize("value", [1, 0.0, "T", None])
def test_flag_setter_accepts_only_bool(value):
    with pytest.raises(FieldTypeError):
        ShapeBuilder().with_t_f(value)


def test_identifier_setter_accepts_only_text():
    with pytest.raises(FieldTypeError):
        ShapeBuilder().with_edi_std_nomenclature(14)
    with pytest.raises(TypeError):
        ShapeBuilder().with_aisc_manual_label(None)


def test_generic_set_rejects_unknown_fields():
    with pytest.raises(UnknownFieldError) as exc:
        ShapeBuilder().set("depth", 8.0)
    assert isinstance(exc.value, KeyError)
    assert "depth" in str(exc.value)


def test_fields_returns_a_copy():
    builder = ShapeBuilder().with_tw(0.23)
    snapshot = builder.fields()
    snapshot["tw"] = 99.0
    assert builder.get("tw") == 0.23


def test_update_sets_many():
    builder = ShapeBuilder().update({"od": 2.375, "id": 2.067})
    assert "od" in builder and "id" in builder
    assert list(builder) == ["od", "id"]
