"""Interactive prompting for values the operator did not pass as options.

Validators return an `Accepted` or `Rejected` result instead of raising, so
the prompt loop stays testable without a terminal.
"""

import getpass
import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO, Union

from admin_console.core.exceptions import PromptAbortedError


@dataclass(frozen=True)
class Accepted:
    """The answer is valid; `value` is what the prompt returns."""

    value: str


@dataclass(frozen=True)
class Rejected:
    """The answer is invalid; `message` is shown before asking again."""

    message: str


PromptResult = Union[Accepted, Rejected]
Validator = Callable[[str], PromptResult]


class InteractivePrompt:
    """Ask the operator a question on the terminal.

    Hidden questions are read with `getpass`, which does not echo input.
    Rejected answers are reported on stderr and the question is asked again,
    up to `max_attempts` times when a limit is set.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        hidden_input_func: Callable[[str], str] = getpass.getpass,
        stderr: Optional[TextIO] = None,
        max_attempts: Optional[int] = None,
    ):
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._input = input_func
        self._hidden_input = hidden_input_func
        self._stderr = stderr
        self.max_attempts = max_attempts

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def ask(self, prompt_text: str, hidden: bool = False, validator: Optional[Validator] = None) -> str:
        """Ask until the validator accepts an answer.

        Args:
            prompt_text: Question shown to the operator.
            hidden: Do not echo the answer.
            validator: Checks the raw answer; without one any answer is accepted.

        Returns:
            str: The accepted value.

        Raises:
            PromptAbortedError: On end of input, Ctrl-C, or when attempts run out.
        """
        read = self._hidden_input if hidden else self._input
        attempts = 0

        while True:
            attempts += 1
            try:
                answer = read(prompt_text)
            except (EOFError, KeyboardInterrupt) as e:
                raise PromptAbortedError("Input aborted by operator") from e

            if validator is None:
                return answer

            result = validator(answer)
            if isinstance(result, Accepted):
                return result.value

            self.stderr.write(result.message + "\n")
            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise PromptAbortedError(result.message)
