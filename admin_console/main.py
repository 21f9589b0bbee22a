"""Main entry point for the admin console.

Parses the command line, initializes logging and runs the selected command.
The return value is the process exit code.
"""

import argparse
import sys
from typing import List, Optional, Sequence

from admin_console import __version__
from admin_console.adapters.cli.commands import FAILURE, BaseCommand, get_commands
from admin_console.core.exceptions import AdminConsoleError
from admin_console.core.initialization import initialize_application
from admin_console.core.logging import logger


def build_parser(commands: Sequence[BaseCommand]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="admin-console",
        description="Administrative maintenance commands.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", default=None, help="Minimum log level (default: LOG_LEVEL setting)")
    parser.add_argument("--log-json", action="store_true", default=None, help="Render log entries as JSON")
    parser.add_argument(
        "-n",
        "--no-interaction",
        dest="interactive",
        action="store_false",
        help="Do not ask any interactive question",
    )

    # The same flag may also follow the command name. SUPPRESS keeps the
    # subparser from resetting a flag given before the command.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-n",
        "--no-interaction",
        dest="interactive",
        action="store_false",
        default=argparse.SUPPRESS,
        help="Do not ask any interactive question",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>", required=True)
    for command in commands:
        subparser = subparsers.add_parser(
            command.name,
            parents=[common],
            help=command.help,
            description=command.help,
        )
        command.add_arguments(subparser)

    return parser


def main(argv: Optional[List[str]] = None, commands: Optional[Sequence[BaseCommand]] = None) -> int:
    """Run one console command.

    Args:
        argv: Arguments without the program name; defaults to ``sys.argv[1:]``.
        commands: Available commands; defaults to every registered command.

    Returns:
        int: Process exit code, 0 on success and 1 on failure.
    """
    commands = list(commands) if commands is not None else get_commands()
    options = build_parser(commands).parse_args(argv)

    initialize_application(log_level=options.log_level, json_logs=options.log_json)

    command = next(c for c in commands if c.name == options.command)
    logger.debug("command_started", command=command.name, interactive=options.interactive)

    try:
        exit_code = command.run(options, interactive=options.interactive)
    except AdminConsoleError as e:
        logger.error("command_failed", command=command.name, error_code=e.code)
        sys.stderr.write(f"{e.message}\n")
        return FAILURE

    logger.debug("command_finished", command=command.name, exit_code=exit_code)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
