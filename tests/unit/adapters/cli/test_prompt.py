import io
from unittest.mock import MagicMock

import pytest

from admin_console.adapters.cli.prompt import Accepted, InteractivePrompt, Rejected
from admin_console.adapters.cli.validators import not_empty, password_validator
from admin_console.core.exceptions import PromptAbortedError
from admin_console.domain.interfaces.services import IPasswordPolicyValidator


def answers(*values):
    """Input function returning `values` one by one, then signalling end of input."""
    iterator = iter(values)

    def read(prompt_text):
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError from None

    return MagicMock(side_effect=read)


class TestInteractivePrompt:
    @pytest.mark.unit
    def test_visible_question_uses_input(self):
        visible, hidden = answers("admin"), answers()
        prompt = InteractivePrompt(input_func=visible, hidden_input_func=hidden, stderr=io.StringIO())

        assert prompt.ask("Admin user: ") == "admin"
        visible.assert_called_once_with("Admin user: ")
        hidden.assert_not_called()

    @pytest.mark.unit
    def test_hidden_question_does_not_echo(self):
        visible, hidden = answers(), answers("s3cret")
        prompt = InteractivePrompt(input_func=visible, hidden_input_func=hidden, stderr=io.StringIO())

        assert prompt.ask("Admin password: ", hidden=True) == "s3cret"
        hidden.assert_called_once_with("Admin password: ")
        visible.assert_not_called()

    @pytest.mark.unit
    def test_rejected_answer_is_asked_again(self):
        stderr = io.StringIO()
        prompt = InteractivePrompt(input_func=answers("", "  ", "admin"), stderr=stderr)

        assert prompt.ask("Admin user: ", validator=not_empty) == "admin"
        assert stderr.getvalue() == "The value cannot be empty.\n" * 2

    @pytest.mark.unit
    def test_validator_may_transform_the_value(self):
        prompt = InteractivePrompt(input_func=answers(" admin "), stderr=io.StringIO())

        assert prompt.ask("Admin user: ", validator=lambda v: Accepted(v.strip())) == "admin"

    @pytest.mark.unit
    def test_attempts_are_bounded(self):
        prompt = InteractivePrompt(
            input_func=answers("", "", "admin"), stderr=io.StringIO(), max_attempts=2
        )

        with pytest.raises(PromptAbortedError, match="The value cannot be empty."):
            prompt.ask("Admin user: ", validator=not_empty)

    @pytest.mark.unit
    def test_end_of_input_aborts(self):
        prompt = InteractivePrompt(input_func=answers(), stderr=io.StringIO())

        with pytest.raises(PromptAbortedError):
            prompt.ask("Admin user: ")

    @pytest.mark.unit
    def test_keyboard_interrupt_aborts(self):
        prompt = InteractivePrompt(input_func=MagicMock(side_effect=KeyboardInterrupt), stderr=io.StringIO())

        with pytest.raises(PromptAbortedError):
            prompt.ask("Admin user: ")

    @pytest.mark.unit
    def test_max_attempts_must_be_positive(self):
        with pytest.raises(ValueError):
            InteractivePrompt(max_attempts=0)


class TestValidators:
    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["", " ", "\t"])
    def test_not_empty_rejects_blank(self, value):
        assert not_empty(value) == Rejected("The value cannot be empty.")

    @pytest.mark.unit
    def test_not_empty_keeps_value(self):
        assert not_empty(" admin ") == Accepted(" admin ")

    @pytest.mark.unit
    def test_password_required(self):
        policy = MagicMock(spec=IPasswordPolicyValidator)
        validate = password_validator(policy)

        assert validate("   ") == Rejected("A password is required.")
        policy.validate.assert_not_called()

    @pytest.mark.unit
    def test_password_policy_messages_are_joined(self):
        policy = MagicMock(spec=IPasswordPolicyValidator)
        policy.validate.return_value = ["too short", "no digit"]

        assert password_validator(policy)("abc") == Rejected("too short\nno digit")

    @pytest.mark.unit
    def test_password_accepted(self):
        policy = MagicMock(spec=IPasswordPolicyValidator)
        policy.validate.return_value = []

        assert password_validator(policy)("Str0ngP@ssw0rd!") == Accepted("Str0ngP@ssw0rd!")
