import pytest

from leptjson.errors import ParseError, ParseErrorCode


@pytest.mark.parametrize(
    "number, name",
    [
        (1, "EXPECT_VALUE"),
        (2, "INVALID_VALUE"),
        (3, "ROOT_NOT_SINGULAR"),
        (4, "NUMBER_TOO_BIG"),
        (5, "MISS_QUOTATION_MARK"),
        (6, "INVALID_STRING_ESCAPE"),
        (7, "INVALID_STRING_CHAR"),
        (8, "INVALID_UNICODE_HEX"),
        (9, "INVALID_UNICODE_SURROGATE"),
        (10, "MISS_COMMA_OR_SQUARE_BRACKET"),
        (11, "MISS_KEY"),
        (12, "MISS_COLON"),
        (13, "MISS_COMMA_OR_CURLY_BRACKET"),
    ],
)
def test_integer_codes_follow_documented_order(number, name):
    err = ParseError(number, 0)
    assert err.code.name == name
    assert err.code == number


def test_error_keeps_code_and_position():
    err = ParseError(ParseErrorCode.MISS_KEY, 7)
    assert err.code is ParseErrorCode.MISS_KEY
    assert err.position == 7


def test_error_message_names_the_code():
    err = ParseError(ParseErrorCode.NUMBER_TOO_BIG, 0)
    assert "NUMBER_TOO_BIG" in str(err)
    assert "0" in str(err)


def test_error_accepts_integer_code():
    err = ParseError(2, 3)
    assert err.code is ParseErrorCode.INVALID_VALUE


def test_error_rejects_unknown_code():
    with pytest.raises(ValueError):
        ParseError(99, 0)


def test_error_is_caught_as_value_error():
    err = ParseError(ParseErrorCode.MISS_COLON, 4)
    caught = None
    try:
        raise err
    except ValueError as exc:
        caught = exc
    assert caught is err
    assert caught.code is ParseErrorCode.MISS_COLON
    assert caught.position == 4