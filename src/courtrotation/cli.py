"""Command-line interface for Court Rotation.

Each command loads the session for the chosen day (creating it with the
default roster if needed), applies one operation, saves, and prints the
session.
"""

# Court Rotation
# Copyright (C) 2025  Court Rotation developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from courtrotation.constants import DEFAULT_DATA_DIR_NAME
from courtrotation.display import format_round, format_session, name_map
from courtrotation.exceptions import CourtRotationException
from courtrotation.models.session.session import Session
from courtrotation.storage import SessionStore
from courtrotation.utils import set_log_level, setup_logger

logger = setup_logger(__name__)


def _cmd_show(session: Session, args: argparse.Namespace) -> bool:
    return False


def _cmd_generate(session: Session, args: argparse.Namespace) -> bool:
    record = session.generate_round()
    print(format_round(record, name_map(session.participants), len(session.rounds)))
    print()
    return True


def _cmd_undo(session: Session, args: argparse.Namespace) -> bool:
    if session.undo() is None:
        print("Nothing to undo.\n")
        return False
    print("Undid the last change.\n")
    return True


def _cmd_weights(session: Session, args: argparse.Namespace) -> bool:
    if args.reset:
        session.reset_weights()
    if args.partner is not None:
        session.set_w_partner(args.partner)
    if args.opp is not None:
        session.set_w_opp(args.opp)
    if args.prev is not None:
        session.set_w_prev(args.prev)
    return True


def _cmd_select(session: Session, args: argparse.Namespace) -> bool:
    session.toggle_selected(args.id)
    return True


def _cmd_away(session: Session, args: argparse.Namespace) -> bool:
    session.set_away(args.id, True)
    return True


def _cmd_return(session: Session, args: argparse.Namespace) -> bool:
    session.set_away(args.id, False)
    return True


def _cmd_guest(session: Session, args: argparse.Namespace) -> bool:
    guest = session.add_guest(" ".join(args.name), honorific=args.honorific)
    print(f"Added guest {guest.name} ({guest.id}).\n")
    return True


def _cmd_remove(session: Session, args: argparse.Namespace) -> bool:
    session.remove_participant(args.id)
    return True


def _cmd_clear_today(session: Session, args: argparse.Namespace) -> bool:
    session.clear_today()
    return True


def _cmd_seed(session: Session, args: argparse.Namespace) -> bool:
    session.set_day_seed(args.value)
    return True


def _cmd_reset(session: Session, args: argparse.Namespace) -> bool:
    session.reset()
    return True


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="courtrotation",
        description="Fair 2 vs 2 round rotation for recreational sessions",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path.home() / DEFAULT_DATA_DIR_NAME,
        help=f"Directory holding saved sessions (default: ~/{DEFAULT_DATA_DIR_NAME})",
    )
    parser.add_argument(
        "--date",
        default=None,
        help="Session day, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--seed",
        default=None,
        help="Tie-break seed for a new session (default: the session date)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    commands.add_parser("show", help="Show roster, weights and rounds").set_defaults(
        func=_cmd_show
    )
    commands.add_parser("generate", help="Generate the next round").set_defaults(
        func=_cmd_generate
    )
    commands.add_parser("undo", help="Undo the last change").set_defaults(
        func=_cmd_undo
    )

    weights = commands.add_parser("weights", help="Set fairness weights (0-5)")
    weights.add_argument("--partner", type=float, help="Repeat partner weight")
    weights.add_argument("--opp", type=float, help="Repeat opponent weight")
    weights.add_argument("--prev", type=float, help="Same-as-previous-round weight")
    weights.add_argument("--reset", action="store_true", help="Restore default weights")
    weights.set_defaults(func=_cmd_weights)

    for name, func, text in (
        ("select", _cmd_select, "Toggle whether a participant is in the pool"),
        ("away", _cmd_away, "Mark a selected participant as away"),
        ("return", _cmd_return, "Bring an away participant back"),
        ("remove", _cmd_remove, "Remove a participant from the roster"),
    ):
        sub = commands.add_parser(name, help=text)
        sub.add_argument("id", help="Participant id")
        sub.set_defaults(func=func)

    guest = commands.add_parser("guest", help="Add a guest for today")
    guest.add_argument("name", nargs="+", help="Guest name")
    guest.add_argument(
        "--honorific", action="store_true", help="Append an honorific to the name"
    )
    guest.set_defaults(func=_cmd_guest)

    commands.add_parser("clear-today", help="Remove today's guests").set_defaults(
        func=_cmd_clear_today
    )

    seed = commands.add_parser("seed", help="Change the tie-break seed")
    seed.add_argument("value", help="New seed text")
    seed.set_defaults(func=_cmd_seed)

    commands.add_parser(
        "reset", help="Start the day over with the default roster"
    ).set_defaults(func=_cmd_reset)

    return parser


def run(args: argparse.Namespace) -> int:
    """Execute one parsed command.

    Returns:
        Exit code
    """
    store = SessionStore(args.data_dir)
    session_date = args.date or date.today().isoformat()
    session = store.load_or_create(session_date, day_seed=args.seed)

    changed = args.func(session, args)
    if changed:
        store.save(session)

    print(format_session(session))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging
    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        return run(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except CourtRotationException as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
