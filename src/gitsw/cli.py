#!/usr/bin/env python3
"""gitsw CLI - interactively switch git branches."""

import argparse
import logging
import sys

from rich.console import Console

from gitsw import __version__
from gitsw.config import Settings
from gitsw.exceptions import GitError, SwitchError
from gitsw.git import list_branches, switch_branch
from gitsw.logging_config import setup_logging
from gitsw.options import TITLES, EmptyChoices, Mode, build_choices
from gitsw.tui import MUTED, prompt_for_branch

logger = logging.getLogger(__name__)

SPINNER_TITLES = {
    Mode.LOCAL: "Fetching local branches...",
    Mode.REMOTE: "Fetching remote branches...",
    Mode.ALL: "Fetching branches...",
}


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0: {value!r}")
    return number


def cmd_switch(branch: str) -> None:
    """Switch directly to BRANCH (or '-' for the previous branch)."""
    switch_branch(branch)


def cmd_interactive(mode: Mode, settings: Settings, console: Console) -> None:
    """List branches, let the user pick one, then switch to it."""
    with console.status(SPINNER_TITLES[mode]):
        listing = list_branches(
            local=mode in (Mode.LOCAL, Mode.ALL),
            remote=mode in (Mode.REMOTE, Mode.ALL),
            timeout=settings.timeout,
        )

    try:
        choice_set = build_choices(mode, listing.local, listing.remote, listing.current)
    except EmptyChoices as e:
        console.print(e.message, style=MUTED, highlight=False)
        return

    choice = prompt_for_branch(choice_set, TITLES[mode])
    if choice is None:
        console.print("Operation cancelled.", style=MUTED, highlight=False)
        return

    logger.info("Switching to %s (picked %s)", choice.target, choice.ref)
    switch_branch(choice.target)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitsw",
        description="Interactively switch to a local branch.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gitsw                 Interactive branch selection
  gitsw feature/auth    Switch to specific branch
  gitsw -               Switch to previous branch
  gitsw -a              Select from all branches
  gitsw -r              Select from remote branches

Environment:
  GITSW_TIMEOUT         Default for --timeout
  GITSW_LOG_LEVEL       Logging level (DEBUG, INFO, WARNING, ERROR)
        """,
    )
    parser.add_argument(
        "branch",
        nargs="?",
        help="Branch to switch to; '-' switches to the previous branch",
    )

    modes = parser.add_mutually_exclusive_group()
    modes.add_argument(
        "--all",
        "-a",
        action="store_true",
        help="Select from all branches (local + remote)",
    )
    modes.add_argument(
        "--remote",
        "-r",
        action="store_true",
        help="Select from remote branches (+ current branch)",
    )

    parser.add_argument(
        "--timeout",
        "-t",
        type=positive_float,
        default=None,
        metavar="SECONDS",
        help="Time limit for listing branches (default: 5)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log git invocations to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.branch is not None and (args.all or args.remote):
        parser.error("a branch name cannot be combined with --all or --remote")

    settings = Settings.from_env()
    if args.timeout is not None:
        settings.timeout = args.timeout
    if args.verbose:
        settings.log_level = "DEBUG"
    setup_logging(settings.log_level)

    console = Console(stderr=True)

    try:
        if args.branch is not None:
            cmd_switch(args.branch)
        elif args.all:
            cmd_interactive(Mode.ALL, settings, console)
        elif args.remote:
            cmd_interactive(Mode.REMOTE, settings, console)
        else:
            cmd_interactive(Mode.LOCAL, settings, console)
    except SwitchError as e:
        # git already printed its own error
        logger.debug("%s", e.message)
        sys.exit(e.exit_code or 1)
    except GitError as e:
        logger.debug("%s (command: %s, exit code: %s)", e.message, e.command, e.exit_code)
        print(str(e), file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
