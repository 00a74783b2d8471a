"""
Unit tests for FormState
"""
from signup_app.client.form_state import FormState, SUBMIT_LABEL


class TestFormState:
    """Tests for FormState helpers"""

    def test_defaults(self):
        state = FormState()
        assert state.values["terms"] is False
        assert state.values["fullname"] == ""
        assert not state.has_errors()
        assert state.submit.label == SUBMIT_LABEL
        assert state.submitting is False

    def test_value_normalization(self):
        state = FormState()
        state.values["fullname"] = "  Jane  "
        state.values["password"] = " Abcdef1! "
        assert state.value("fullname") == "Jane"
        assert state.value("password") == " Abcdef1! "

    def test_reset_clears_values_and_errors(self, filled_state):
        filled_state.set_error("email", "Enter a valid email.")
        filled_state.reset()
        assert filled_state.values["email"] == ""
        assert filled_state.values["terms"] is False
        assert not filled_state.has_errors()

    def test_states_are_independent(self):
        first, second = FormState(), FormState()
        first.values["email"] = "a@b.co"
        assert second.values["email"] == ""
