import pytest

from password_policy import (
    ErrorKind,
    PasswordPolicyError,
    get_invalid_passwords,
    has_between_six_and_nine_chars,
    has_digit,
    has_invalid_sequence,
    has_lower_alpha,
    has_special_char,
    has_upper_alpha,
    is_valid_length,
    is_valid_password,
    is_weak_password,
)


def assert_raises_kind(kind, func, *args):
    with pytest.raises(PasswordPolicyError) as exc_info:
        func(*args)
    assert exc_info.value.kind == kind
    return exc_info.value


def test_is_valid_password_success(valid_password):
    assert is_valid_password(valid_password) is True


def test_is_valid_password_propagates_first_error():
    assert_raises_kind(ErrorKind.LENGTH, is_valid_password, None)
    assert_raises_kind(ErrorKind.LENGTH, is_valid_password, "short")
    assert_raises_kind(ErrorKind.NO_DIGIT, is_valid_password, "Abcdefgh!!xy")
    assert_raises_kind(ErrorKind.INVALID_SEQUENCE, is_valid_password, "Aa11100!")
    assert_raises_kind(ErrorKind.WEAK_PASSWORD, is_valid_password, "Abc1!23")


@pytest.mark.parametrize("password", [None, "", "a", "Ab1!x"])
def test_is_valid_length_rejects_short_and_null(password):
    assert_raises_kind(ErrorKind.LENGTH, is_valid_length, password)


def test_is_valid_length_null_message():
    error = assert_raises_kind(ErrorKind.LENGTH, is_valid_length, None)
    assert error.message == "Password cannot be null."


def test_is_valid_length_accepts_floor():
    assert is_valid_length("abcdef") is True


def test_has_between_six_and_nine_chars_checks_floor_only():
    assert has_between_six_and_nine_chars("abcdef") is None
    assert has_between_six_and_nine_chars("a" * 30) is None
    error = assert_raises_kind(ErrorKind.LENGTH, has_between_six_and_nine_chars, "abc")
    assert error.message == "Password length must be at least 6 characters."


def test_has_between_six_and_nine_chars_rejects_null():
    error = assert_raises_kind(ErrorKind.LENGTH, has_between_six_and_nine_chars, None)
    assert error.message == "Password cannot be null."


def test_character_class_checks():
    assert has_digit("abc1") is True
    assert has_upper_alpha("abC") is True
    assert has_lower_alpha("ABc") is True
    assert has_special_char("abc-") is True
    assert_raises_kind(ErrorKind.NO_DIGIT, has_digit, "abc")
    assert_raises_kind(ErrorKind.NO_UPPER_ALPHA, has_upper_alpha, "abc")
    assert_raises_kind(ErrorKind.NO_LOWER_ALPHA, has_lower_alpha, "ABC")
    assert_raises_kind(ErrorKind.NO_SPECIAL_CHAR, has_special_char, "abc_")


def test_character_class_checks_reject_null_with_their_own_kind():
    assert_raises_kind(ErrorKind.NO_DIGIT, has_digit, None)
    assert_raises_kind(ErrorKind.NO_UPPER_ALPHA, has_upper_alpha, None)
    assert_raises_kind(ErrorKind.NO_LOWER_ALPHA, has_lower_alpha, None)
    assert_raises_kind(ErrorKind.NO_SPECIAL_CHAR, has_special_char, None)


def test_has_invalid_sequence():
    assert has_invalid_sequence("Aa1100!!") is False
    assert has_invalid_sequence("ab") is False
    assert_raises_kind(ErrorKind.INVALID_SEQUENCE, has_invalid_sequence, "Aa11100!")


def test_is_weak_password_never_returns_true():
    assert is_weak_password("abcde") is False
    assert is_weak_password("abcdefghij") is False
    for length in (6, 7, 8, 9):
        assert_raises_kind(ErrorKind.WEAK_PASSWORD, is_weak_password, "a" * length)
    assert_raises_kind(ErrorKind.WEAK_PASSWORD, is_weak_password, None)


def test_get_invalid_passwords_preserves_order_and_skips_valid(valid_password):
    report = get_invalid_passwords(["short", valid_password, None])
    assert report == [
        ("short", "The password must be at least 6 characters long"),
        (None, "Password cannot be null."),
    ]


def test_get_invalid_passwords_never_raises():
    passwords = [None, "", "Abcdefgh!!xy", "Aa11100!", "Abc1!23", "ABCDEF1!23"]
    report = get_invalid_passwords(passwords)
    assert [password for password, _ in report] == passwords


def test_get_invalid_passwords_accepts_generators(valid_password):
    assert get_invalid_passwords(p for p in [valid_password]) == []
