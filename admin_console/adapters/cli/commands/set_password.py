"""`admin:user:set-password`: forcefully set the password of an admin user."""

import argparse
from contextlib import AbstractContextManager
from typing import Callable, Optional, TextIO

from admin_console.adapters.cli.commands.base import FAILURE, SUCCESS, BaseCommand
from admin_console.adapters.cli.prompt import InteractivePrompt
from admin_console.adapters.cli.validators import not_empty, password_validator
from admin_console.core.exceptions import (
    AreaCodeAlreadySetError,
    PersistenceError,
    PromptAbortedError,
    ValidationError,
)
from admin_console.core.state import ApplicationState, Area, app_state
from admin_console.domain.services.auth.credential_update import CredentialUpdateService
from admin_console.infrastructure.dependency_injection.credential_dependencies import (
    credential_update_service_scope,
)

ServiceScope = Callable[[], AbstractContextManager]


class AdminUserSetPasswordCommand(BaseCommand):
    """Forcefully sets the password of an existing admin user.

    Missing ``--user`` or ``--password`` values are asked for interactively,
    the password without echo. The new password is validated, hashed and
    saved, and the user is flagged to change it at next login.
    """

    name = "admin:user:set-password"
    help = "Forcefully sets the password of an admin user"

    def __init__(
        self,
        service_scope: ServiceScope = credential_update_service_scope,
        state: Optional[ApplicationState] = None,
        prompt: Optional[InteractivePrompt] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        super().__init__(stdout=stdout, stderr=stderr)
        self._service_scope = service_scope
        self._state = state or app_state
        self._prompt = prompt

    @property
    def prompt(self) -> InteractivePrompt:
        if self._prompt is None:
            self._prompt = InteractivePrompt(stderr=self._stderr)
        return self._prompt

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--user", metavar="USERNAME", help="(Required) Admin username")
        parser.add_argument("--password", metavar="PASSWORD", help="(Required) Admin password")

    def run(self, options: argparse.Namespace, interactive: bool = True) -> int:
        with self._service_scope() as service:
            if interactive:
                try:
                    self.interact(options, service)
                except PromptAbortedError as e:
                    self.stderr.write(f"{e.message}\n")
                    return FAILURE
            return self.execute(options, service)

    def interact(self, options: argparse.Namespace, service: CredentialUpdateService) -> None:
        """Ask for whichever of username and password was not given.

        The password is asked for even when the username is unknown; the
        "not found" message comes from `execute` only.
        """
        if not options.user:
            options.user = self.prompt.ask("Admin user: ", validator=not_empty)

        if not options.password:
            options.password = self.prompt.ask(
                "Admin password: ",
                hidden=True,
                validator=password_validator(service.password_policy),
            )

    def execute(self, options: argparse.Namespace, service: CredentialUpdateService) -> int:
        try:
            self._state.set_area_code(Area.ADMINHTML)
        except AreaCodeAlreadySetError:
            pass

        try:
            report = service.set_password(options.user or "", options.password or "")
        except ValidationError as e:
            self.stderr.write("\n".join(e.messages) + "\n")
            return FAILURE
        except PersistenceError as e:
            self.stderr.write(f"Failed to set new password: {e.message}\n")
            return FAILURE

        self.stdout.write(f"Password successfully set for user: {report.username}\n")
        return SUCCESS
