import math

import pytest

from bmi import (
    BANDS,
    INVALID_INPUT_MESSAGE,
    InvalidMeasurementError,
    Tone,
    bands_frame,
    calculate_bmi,
    classify,
    evaluate,
    format_range,
    parse_measurement,
    validate,
)


def test_bmi_formula():
    assert calculate_bmi(180, 81) == 81 / (1.8 ** 2)
    assert round(calculate_bmi(175, 70), 2) == 22.86


def test_normal_weight_scenario():
    result = evaluate(175, 70)
    assert round(result.value, 2) == 22.86
    assert result.category == "Peso normal"
    assert result.tone is Tone.GREEN


def test_obesity_class_two_scenario():
    result = evaluate(160, 100)
    assert round(result.value, 2) == 39.06
    assert result.category == "Obesidade Grau II"
    assert result.tone is Tone.RED


@pytest.mark.parametrize(
    "value, label",
    [
        (10.0, "Abaixo do peso"),
        (18.49, "Abaixo do peso"),
        (18.5, "Peso normal"),
        (24.95, "Peso normal"),
        (25.0, "Sobrepeso"),
        (29.99, "Sobrepeso"),
        (30.0, "Obesidade Grau I"),
        (35.0, "Obesidade Grau II"),
        (39.99, "Obesidade Grau II"),
        (40.0, "Obesidade Grau III"),
        (72.3, "Obesidade Grau III"),
    ],
)
def test_classify_boundaries(value, label):
    assert classify(value).label == label


def test_bands_cover_the_line_without_overlap():
    assert BANDS[0].lower == -math.inf
    assert BANDS[-1].upper == math.inf
    for previous, current in zip(BANDS, BANDS[1:]):
        assert previous.upper == current.lower
    for band in BANDS:
        assert classify(band.lower if band.lower != -math.inf else 0.0) == band


def test_evaluate_is_idempotent():
    assert evaluate(170, 65) == evaluate(170, 65)


def test_calculate_bmi_rejects_non_positive():
    with pytest.raises(ValueError):
        calculate_bmi(0, 70)
    with pytest.raises(ValueError):
        calculate_bmi(170, -1)


@pytest.mark.parametrize("raw", ["abc", "", "   ", "0", "-5", "nan", "inf", "1.7.5", None])
def test_parse_measurement_rejects(raw):
    with pytest.raises(InvalidMeasurementError) as excinfo:
        parse_measurement(raw, "height")
    assert str(excinfo.value) == INVALID_INPUT_MESSAGE
    assert excinfo.value.field == "height"


def test_parse_measurement_accepts_decimal_comma_and_spaces():
    assert parse_measurement("72,5", "weight") == 72.5
    assert parse_measurement(" 175 ", "height") == 175.0


def test_validate_reports_first_bad_field():
    assert validate("175", "70") == (175.0, 70.0)
    with pytest.raises(InvalidMeasurementError) as excinfo:
        validate("175", "abc")
    assert excinfo.value.field == "weight"


def test_bands_frame():
    df = bands_frame()
    assert list(df.columns) == ["Faixa de IMC", "Classificação"]
    assert len(df) == 6
    assert df["Classificação"].tolist()[1] == "Peso normal"
    assert df["Faixa de IMC"].tolist()[0] == "< 18.5"
    assert df["Faixa de IMC"].tolist()[1] == "18.5 – 24.9"
    assert df["Faixa de IMC"].tolist()[-1] == "≥ 40.0"


def test_format_range_middle_band():
    assert format_range(BANDS[3]) == "30.0 – 34.9"


@pytest.mark.parametrize(
    "height, weight",
    [
        (1e-200, 70),   # squared height underflows to zero
        (1, 1e308),     # BMI overflows to inf
        (1e200, 70),    # squared height overflows
        (1e10, 1e-310), # BMI underflows to zero
    ],
)
def test_calculate_bmi_rejects_values_outside_float_range(height, weight):
    with pytest.raises(InvalidMeasurementError):
        calculate_bmi(height, weight)
