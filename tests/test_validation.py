import pytest

from courtrotation.exceptions import (
    InvalidConfigurationException,
    InvalidParticipantDataException,
)
from courtrotation.models.weights import WeightConfig
from courtrotation.utils.names import with_honorific
from courtrotation.utils.validation import (
    clamp_weight,
    validate_name,
    validate_name_strict,
    validate_session_date,
    validate_session_date_strict,
    validate_weight,
)


@pytest.mark.parametrize(
    "value, expected",
    [(0, 0), (3, 3), (9, 5), (-2, 0), (2.6, 3), (1.2, 1), ("4", 4), (" 7 ", 5)],
)
def test_clamp_weight(value, expected):
    assert clamp_weight(value) == expected


@pytest.mark.parametrize("value", [None, "", "  ", "heavy", True, float("nan")])
def test_invalid_weights(value):
    result = validate_weight(value)

    assert not result
    assert result.error_message


def test_clamp_weight_raises_on_text():
    with pytest.raises(InvalidConfigurationException):
        clamp_weight("lots")


def test_weight_config_clamps_fields():
    weights = WeightConfig(w_partner=11, w_opp=-1, w_prev=2)

    assert (weights.w_partner, weights.w_opp, weights.w_prev) == (5, 0, 2)


def test_weight_config_unknown_name():
    with pytest.raises(InvalidConfigurationException):
        WeightConfig().with_weight("w_other", 1)


def test_validate_name_collapses_whitespace():
    result = validate_name("  Ana \t Maria  ")

    assert result
    assert result.sanitized_value == "Ana Maria"


def test_validate_name_limits():
    assert not validate_name("")
    assert validate_name("", required=False)
    assert not validate_name("x" * 41)
    assert validate_name("佐藤 花子")


def test_validate_name_strict_raises():
    with pytest.raises(InvalidParticipantDataException):
        validate_name_strict("bad\x00name")


@pytest.mark.parametrize(
    "value", ["2025-10-15", " 2025-10-15 ", "2025-10-15T18:45:00", "2025-10-15T18:45:00+09:00"]
)
def test_session_date_is_normalized(value):
    assert validate_session_date(value).sanitized_value == "2025-10-15"


@pytest.mark.parametrize("value", ["", "tomorrow", "2025-13-01"])
def test_invalid_session_dates(value):
    assert not validate_session_date(value)
    with pytest.raises(InvalidConfigurationException):
        validate_session_date_strict(value)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Sato", "Satoさん"),
        ("  Sato   Taro ", "Sato Taroさん"),
        ("Satoくん", "Satoくん"),
        ("Sato氏", "Sato氏"),
        ("   ", ""),
    ],
)
def test_with_honorific(raw, expected):
    assert with_honorific(raw) == expected
