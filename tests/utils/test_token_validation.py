import pytest

from expo_push.exceptions import InvalidTokenInputError, NoValidTokensError
from expo_push.utils import (
    array_wrap,
    is_expo_push_token,
    is_list_shaped,
    token_hint,
    validate_tokens,
)


@pytest.mark.parametrize(
    "value",
    [
        "ExponentPushToken[xxxxxxxxxxxxxxxxxxxxxx]",
        "ExpoPushToken[xxxxxxxxxxxxxxxxxxxxxx]",
        "ExpoPushToken[]",
    ],
)
def test_is_expo_push_token_accepts_both_prefixes(value: str) -> None:
    assert is_expo_push_token(value) is True


@pytest.mark.parametrize(
    "value",
    [
        "ExponentPushToken[missing-bracket",
        "FcmPushToken[xxxxxxxxxxxxxxxxxxxx]",
        "invalid-token]",
        "Expo[]",
        "",
        42,
        None,
        ["ExponentPushToken[xxxxxxxxxxxxxx]"],
    ],
)
def test_is_expo_push_token_rejects(value: object) -> None:
    assert is_expo_push_token(value) is False


def test_validate_tokens_drops_invalid_and_keeps_order() -> None:
    tokens = validate_tokens(
        [
            "ExponentPushToken[valid-token]",
            "invalid-token]",
            "ExpoPushToken[second]",
        ]
    )

    assert tokens == ["ExponentPushToken[valid-token]", "ExpoPushToken[second]"]


def test_validate_tokens_wraps_a_single_string() -> None:
    assert validate_tokens("ExponentPushToken[abc]") == ["ExponentPushToken[abc]"]


def test_validate_tokens_keeps_duplicates() -> None:
    token = "ExponentPushToken[abc]"

    assert validate_tokens([token, token]) == [token, token]


def test_validate_tokens_accepts_tuples() -> None:
    assert validate_tokens(("ExponentPushToken[abc]",)) == ["ExponentPushToken[abc]"]


@pytest.mark.parametrize("value", [[], "not-a-token", ["bad", "worse"]])
def test_validate_tokens_without_usable_tokens(value: object) -> None:
    with pytest.raises(NoValidTokensError):
        validate_tokens(value)


@pytest.mark.parametrize("value", [42, None, {"token": "ExponentPushToken[abc]"}])
def test_validate_tokens_rejects_malformed_input(value: object) -> None:
    with pytest.raises(InvalidTokenInputError) as exc_info:
        validate_tokens(value)

    assert type(value).__name__ in str(exc_info.value)


def test_token_errors_are_distinct() -> None:
    assert not issubclass(NoValidTokensError, InvalidTokenInputError)
    assert not issubclass(InvalidTokenInputError, NoValidTokensError)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ([1, 2], True),
        (("a",), True),
        ({0: "a", 1: "b"}, True),
        ([], False),
        ({}, False),
        ({1: "a", 2: "b"}, False),
        ({1: "b", 0: "a"}, False),
        ({"key": "value"}, False),
        ("abc", False),
        (None, False),
    ],
)
def test_is_list_shaped(value: object, expected: bool) -> None:
    assert is_list_shaped(value) is expected


def test_array_wrap() -> None:
    assert array_wrap("a") == ["a"]
    assert array_wrap(["a", "b"]) == ["a", "b"]
    assert array_wrap(("a",)) == ["a"]
    assert array_wrap(None) == [None]


def test_token_hint_shortens_long_tokens() -> None:
    assert token_hint("ExponentPushToken[abcdefghijkl]") == "ExponentPush...jkl]"
    assert token_hint("ExpoPushToken[]") == "ExpoPushToken[]"
