import pytest

from password_policy.errors import ErrorKind
from password_policy.rules import (
    check_digit,
    check_length,
    check_lower_alpha,
    check_sequence,
    check_special_char,
    check_upper_alpha,
    check_weak_length,
    define_rules,
)
from policy_config import PolicySettings


def test_rules_are_defined_in_pipeline_order(settings):
    rules = define_rules(settings)
    assert [r.name for r in rules] == [
        "length",
        "digit",
        "upper_alpha",
        "lower_alpha",
        "special_char",
        "sequence",
        "weak_length",
    ]
    assert [r.kind for r in rules] == [
        ErrorKind.LENGTH,
        ErrorKind.NO_DIGIT,
        ErrorKind.NO_UPPER_ALPHA,
        ErrorKind.NO_LOWER_ALPHA,
        ErrorKind.NO_SPECIAL_CHAR,
        ErrorKind.INVALID_SEQUENCE,
        ErrorKind.WEAK_PASSWORD,
    ]


def test_length_rule(settings):
    assert check_length(None, settings) == (True, "Password cannot be null.")
    assert check_length("", settings)[0] is True
    assert check_length("Ab1!x", settings) == (True, "The password must be at least 6 characters long")
    assert check_length("Ab1!xy", settings) == (False, "")


@pytest.mark.parametrize("password", ["abc1def", "9", "Ab٣cdef"])
def test_digit_rule_accepts_decimal_digits(settings, password):
    assert check_digit(password, settings) == (False, "")


def test_digit_rule_rejects(settings):
    assert check_digit("Abcdef!!", settings) == (True, "Password must contain at least one digit.")
    assert check_digit(None, settings)[0] is True


def test_upper_and_lower_rules(settings):
    assert check_upper_alpha("abc", settings)[0] is True
    assert check_upper_alpha("abC", settings) == (False, "")
    assert check_lower_alpha("ABC", settings)[0] is True
    assert check_lower_alpha("ABc", settings) == (False, "")
    assert check_upper_alpha(None, settings)[0] is True
    assert check_lower_alpha(None, settings)[0] is True


@pytest.mark.parametrize("char", list("!@#$%^&*()-+"))
def test_special_rule_accepts_each_literal_character(settings, char):
    assert check_special_char(f"Abc1{char}", settings) == (False, "")


@pytest.mark.parametrize("char", list("_,.=?~/ "))
def test_special_rule_is_not_a_punctuation_class(settings, char):
    is_violated, message = check_special_char(f"Abc1{char}", settings)
    assert is_violated is True
    assert message == "The password must contain at least one special character"


def test_sequence_rule(settings):
    assert check_sequence("Aa11100!", settings)[0] is True
    assert check_sequence("aaa", settings)[0] is True
    assert check_sequence("xyzAAA", settings)[0] is True
    assert check_sequence("Aa1100!!", settings) == (False, "")
    assert check_sequence("aa", settings) == (False, "")
    assert check_sequence("", settings) == (False, "")


def test_sequence_rule_message(settings):
    _, message = check_sequence("zzz", settings)
    assert message == "Password cannot contain more than 2 of the same character in sequence."


def test_weak_length_band(settings):
    assert check_weak_length(None, settings) == (True, "Password cannot be null.")
    assert check_weak_length("a" * 5, settings) == (False, "")
    for length in range(6, 10):
        is_violated, message = check_weak_length("a" * length, settings)
        assert is_violated is True
        assert message == "Password is weak because its length is between 6 and 9 characters."
    assert check_weak_length("a" * 10, settings) == (False, "")


def test_rules_follow_custom_settings():
    custom = PolicySettings(min_length=8, max_repeat=3, special_characters="_", weak_min_length=8, weak_max_length=11)
    assert check_length("Abcd1_x", custom)[1] == "The password must be at least 8 characters long"
    assert check_sequence("aaa", custom) == (False, "")
    assert check_sequence("aaaa", custom)[0] is True
    assert check_special_char("Abc1_", custom) == (False, "")
    assert check_special_char("Abc1!", custom)[0] is True
    assert check_weak_length("a" * 12, custom) == (False, "")
    assert check_weak_length("a" * 11, custom)[0] is True


def test_length_and_runs_count_code_points(settings):
    assert check_length("😀😀😀", settings)[0] is True
    assert check_length("😀😀😀😀😀😀", settings) == (False, "")
    assert check_sequence("😀😀😀", settings)[0] is True
