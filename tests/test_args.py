import pytest

from philosophers.args import (
    INT_MAX,
    ArgumentError,
    Settings,
    check_args,
    parse_long,
    parse_settings,
    valid_input,
)


@pytest.mark.parametrize(
    "text, digits",
    [
        ("42", "42"),
        ("+42", "42"),
        ("  \t42", "42"),
        ("42   ", "42"),
        ("0", "0"),
        ("007", "007"),
        ("\v\f\r\n+15\n", "15"),
    ],
)
def test_valid_input_accepts(text, digits):
    assert valid_input(text) == digits


@pytest.mark.parametrize(
    "text, message",
    [
        ("-5", "The number must be positive"),
        ("abc", "Only digit characters are accepted"),
        ("", "Only digit characters are accepted"),
        ("+", "Only digit characters are accepted"),
        ("+-3", "Only digit characters are accepted"),
        ("12 3", "Only digit characters are accepted"),
        ("12ab", "Only digit characters are accepted"),
        ("12.5", "Only digit characters are accepted"),
        ("12345678901", "The number is bigger than INT_MAX"),
        ("00000000001", "The number is bigger than INT_MAX"),
    ],
)
def test_valid_input_rejects(text, message):
    with pytest.raises(ArgumentError) as info:
        valid_input(text)
    assert str(info.value) == message


def test_valid_input_tolerates_single_trailing_letter():
    assert valid_input("12a") == "12"
    assert valid_input("12a  ") == "12"


def test_valid_input_ten_digits_allowed():
    assert valid_input("9999999999") == "9999999999"


@pytest.mark.parametrize("text, value", [("42", 42), ("+7", 7), (" 0 ", 0), ("0010", 10)])
def test_parse_long(text, value):
    assert parse_long(text) == value


def test_parse_long_int_max():
    assert parse_long("2147483647") == INT_MAX


def test_parse_long_overflow():
    with pytest.raises(ArgumentError, match="The number is not an integer"):
        parse_long("2147483648")


def test_parse_long_invalid():
    with pytest.raises(ArgumentError, match="The number must be positive"):
        parse_long("-1")


@pytest.mark.parametrize("argv", [[], ["5", "800", "200"], ["1", "2", "3", "4", "5", "6"]])
def test_check_args_wrong_count(argv):
    with pytest.raises(ArgumentError, match="Wrong Arguments"):
        check_args(argv)


def test_check_args_empty_argument():
    with pytest.raises(ArgumentError, match="Empty argument"):
        check_args(["5", "", "200", "200"])


def test_check_args_bad_number():
    with pytest.raises(ArgumentError, match="Only digit characters are accepted"):
        check_args(["5", "800", "x", "200"])


def test_check_args_accepts_valid():
    assert check_args(["5", "800", "200", "200", "7"]) is None


def test_parse_settings_without_meal_limit():
    settings = parse_settings(["5", "800", "200", "100"])
    assert settings == Settings(5, 800, 200, 100, -1)
    assert settings.meals_limited is False


def test_parse_settings_with_meal_limit():
    settings = parse_settings(["4", "410", "200", "200", "7"])
    assert settings.count == 4
    assert settings.time_to_die == 410
    assert settings.max_meals == 7
    assert settings.meals_limited is True


def test_parse_settings_zero_meals_not_limited():
    settings = parse_settings(["2", "400", "100", "100", "0"])
    assert settings.max_meals == 0
    assert settings.meals_limited is False


def test_parse_settings_maximum_count():
    assert parse_settings(["200", "800", "200", "200"]).count == 200


def test_parse_settings_zero_philosophers():
    assert parse_settings(["0", "800", "200", "200"]).count == 0


def test_parse_settings_too_many_philosophers():
    with pytest.raises(ArgumentError, match="Arguments must be > 0 and <= 200"):
        parse_settings(["201", "800", "200", "200"])


def test_parse_settings_overflowing_time():
    with pytest.raises(ArgumentError, match="The number is not an integer"):
        parse_settings(["5", "2147483648", "200", "200"])


def test_settings_rejects_negative_times():
    with pytest.raises(ArgumentError):
        Settings(5, -1, 200, 200)
    with pytest.raises(ArgumentError):
        Settings(5, 800, 200, -3)