"""Base class for console commands.

A command declares its name, help text and options, and returns a process
exit code from `run`. Output goes through `self.stdout` and `self.stderr` so
tests can capture it.
"""

import argparse
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

SUCCESS = 0
FAILURE = 1


class BaseCommand(ABC):
    """A single console command."""

    name: str = ""
    help: str = ""

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Register command-specific options on `parser`."""

    @abstractmethod
    def run(self, options: argparse.Namespace, interactive: bool = True) -> int:
        """Execute the command and return its exit code."""
        raise NotImplementedError
