"""
Unit tests for signup_app.domain.validation
"""
import pytest

from signup_app.domain.constants import SignupFields
from signup_app.domain.validation import (
    SIGNUP_RULES,
    SPECIAL_CHARACTERS,
    collect_field_errors,
    validate_age,
    validate_confirm,
    validate_email,
    validate_fullname,
    validate_password,
    validate_phone,
    validate_terms,
    validate_username,
    validate_value,
)


class TestValidateFullname:
    """Tests for validate_fullname"""

    @pytest.mark.parametrize("value", ["Joe", "Jane Doe", "A" * 80, "Mary Ann Smith"])
    def test_letters_and_spaces_pass(self, value):
        assert validate_fullname(value) == ""

    def test_empty_is_required(self):
        assert validate_fullname("") == "Full name is required."

    @pytest.mark.parametrize("value", ["Jo", "John3", "A" * 81, "Jean-Luc"])
    def test_invalid_values_fail(self, value):
        assert validate_fullname(value) == "Use only letters and spaces (3-80 chars)."

    def test_whole_value_must_match(self):
        assert validate_fullname("John3 Doe") != ""

    @pytest.mark.parametrize("value", ["Jane\u3000Doe", "Jane\ufeffDoe", "Jane\u00a0Doe"])
    def test_browser_whitespace_counts_as_space(self, value):
        assert validate_fullname(value) == ""

    @pytest.mark.parametrize("value", ["Jane\x1fDoe", "Jane\x85Doe", "Jane\x1cDoe"])
    def test_control_separators_are_not_spaces(self, value):
        assert validate_fullname(value) == "Use only letters and spaces (3-80 chars)."


class TestValidateEmail:
    """Tests for validate_email"""

    def test_simple_address_passes(self):
        assert validate_email("a@b.co") == ""

    def test_missing_tld_fails(self):
        assert validate_email("a@b") == "Enter a valid email."

    def test_empty_is_required(self):
        assert validate_email("") == "Email is required."

    @pytest.mark.parametrize("value", ["a b@c.de", "a@@b.co", "@b.co", "a@b.", "a@.co"])
    def test_malformed_addresses_fail(self, value):
        assert validate_email(value) == "Enter a valid email."

    def test_byte_order_mark_breaks_address(self):
        assert validate_email("a\ufeffb@c.de") == "Enter a valid email."

    def test_next_line_character_is_not_whitespace(self):
        assert validate_email("a\x85b@c.de") == ""


class TestValidateUsername:
    """Tests for validate_username"""

    @pytest.mark.parametrize("value", ["abc", "john.doe", "a_b-c", "x" * 20, "User123"])
    def test_allowed_charset_passes(self, value):
        assert validate_username(value) == ""

    def test_too_long_rejected(self):
        assert validate_username("a" * 21) == "3-20 chars: letters, numbers, . _ -"

    def test_too_short_rejected(self):
        assert validate_username("ab") == "3-20 chars: letters, numbers, . _ -"

    def test_disallowed_character_rejected(self):
        assert validate_username("john doe") != ""
        assert validate_username("john@doe") != ""

    def test_empty_is_required(self):
        assert validate_username("") == "Username required."

    def test_trailing_newline_rejected(self):
        assert validate_username("john\n") != ""


class TestValidatePassword:
    """Tests for validate_password - first failing check wins"""

    def test_valid_password_passes(self):
        assert validate_password("Abcdef1!") == ""

    def test_empty_is_required(self):
        assert validate_password("") == "Password required."

    def test_short_password(self):
        assert validate_password("Ab1!") == "Password must be at least 8 characters."

    def test_missing_uppercase_reported_first(self):
        # also lacks a symbol; only the uppercase failure is reported
        assert validate_password("abc12345") == "Include at least one uppercase letter."

    def test_missing_digit(self):
        assert validate_password("Abcdefg!") == "Include at least one number."

    def test_missing_symbol(self):
        assert validate_password("Abcdefg1") == "Include at least one special character."

    @pytest.mark.parametrize("symbol", list(SPECIAL_CHARACTERS))
    def test_every_listed_symbol_accepted(self, symbol):
        assert validate_password("Abcdefg1" + symbol) == ""

    def test_unlisted_symbol_rejected(self):
        assert validate_password("Abcdefg1~") == "Include at least one special character."


class TestValidateConfirm:
    """Tests for validate_confirm"""

    def test_matching_passes(self):
        assert validate_confirm("Abcdef1!", "Abcdef1!") == ""

    def test_mismatch(self):
        assert validate_confirm("Abcdef1!", "Abcdef1") == "Passwords do not match."

    def test_empty_confirm(self):
        assert validate_confirm("Abcdef1!", "") == "Please confirm your password."

    def test_exact_match_only(self):
        assert validate_confirm("Abcdef1!", "Abcdef1! ") == "Passwords do not match."


class TestValidatePhone:
    """Tests for validate_phone"""

    def test_empty_is_valid(self):
        assert validate_phone("") == ""

    def test_short_number_fails(self):
        assert validate_phone("12345") == "Phone must be 10 digits."

    def test_ten_digits_pass(self):
        assert validate_phone("1234567890") == ""

    def test_non_ascii_digits_fail(self):
        assert validate_phone("١٢٣٤٥٦٧٨٩٠") == "Phone must be 10 digits."


class TestValidateAge:
    """Tests for validate_age"""

    @pytest.mark.parametrize("value", ["13", "120", "45", 13, 120, "", None, "13.0", "1.3e1", "+20", 13.0])
    def test_valid_or_empty(self, value):
        assert validate_age(value) == ""

    @pytest.mark.parametrize("value", [
        "12", "121", "abc", "13.5", "nan", "inf", 0, True,
        "1_3", "1_2_0", "\u0661\u0663", "\uff11\uff13", "0x10", 13.5,
    ])
    def test_invalid(self, value):
        assert validate_age(value) == "Enter a valid age (13-120)."


class TestValidateTerms:
    """Tests for validate_terms"""

    def test_accepted(self):
        assert validate_terms(True) == ""

    def test_not_accepted(self):
        assert validate_terms(False) == "You must accept terms."


class TestRuleTable:
    """Tests for the shared rule table and gather-all collection"""

    def test_table_covers_every_field_in_order(self):
        assert tuple(SIGNUP_RULES) == SignupFields.ALL

    def test_validate_value_dispatches(self):
        assert validate_value(SignupFields.EMAIL, "a@b") == "Enter a valid email."
        assert validate_value(
            SignupFields.CONFIRM, "x", {SignupFields.PASSWORD: "y"}
        ) == "Passwords do not match."

    def test_unknown_field_raises(self):
        with pytest.raises(KeyError):
            validate_value("nickname", "x")

    def test_collect_all_errors_for_empty_form(self):
        values = {name: "" for name in SignupFields.ALL}
        values[SignupFields.TERMS] = False

        errors = collect_field_errors(values)

        assert [error.field for error in errors] == [
            "fullname", "email", "username", "password", "confirm", "terms",
        ]
        assert errors[0].message == "Full name is required."

    def test_collect_respects_field_subset(self):
        values = {name: "" for name in SignupFields.ALL}
        errors = collect_field_errors(values, SignupFields.SERVER)
        assert "confirm" not in [error.field for error in errors]

    def test_invalid_message_skips_required_rule(self):
        assert SIGNUP_RULES["fullname"].invalid_message == "Use only letters and spaces (3-80 chars)."
        assert SIGNUP_RULES["age"].invalid_message == "Enter a valid age (13-120)."
        assert SIGNUP_RULES["terms"].invalid_message == "You must accept terms."
