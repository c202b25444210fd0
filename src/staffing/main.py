"""
Command-line front end for the staffing planner.

State lives in a JSON file (default: outputs/staffing_state.json) that plays
the part of the browser's local storage, so edits made in one invocation are
visible in the next.

Usage via cli:
    staffing set-shift Server Mon lunch 3
    staffing set-volume 150
    staffing show --role Server
    staffing export --location AH
"""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path
from typing import Sequence

from staffing.config import LOCATIONS, Config, catalog_from_json, find_location
from staffing.reporting import render_summary, show_staffing_overview, write_export
from staffing.roles import PERIODS
from staffing.storage import JsonFileStore
from staffing.store import StaffingStore, parse_count, parse_volume

DEFAULT_STATE_FILE = Path("outputs/staffing_state.json")


def build_store(
    state_file: str | Path = DEFAULT_STATE_FILE,
    roles_file: str | Path | None = None,
) -> StaffingStore:
    """Open the store backed by `state_file`, with an optional role catalog file."""
    config = Config()
    if roles_file is not None:
        config.ROLE_CATALOG = catalog_from_json(roles_file)
    config.OUTPUT_DIR = Path(state_file).parent
    return StaffingStore(config, JsonFileStore(state_file))


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Restaurant staffing planner.")
    parser.add_argument(
        "--state-file",
        type=Path,
        default=DEFAULT_STATE_FILE,
        help=f"Where planner state is kept (default: {DEFAULT_STATE_FILE}).",
    )
    parser.add_argument(
        "--roles",
        type=Path,
        default=None,
        help="JSON role catalog (role -> divisor). Defaults to the built-in roles.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    location_ids = [loc.id for loc in LOCATIONS]

    show = sub.add_parser("show", help="Print the staffing summary.")
    show.add_argument("--role", default=None, help="Also print this role's day grid.")
    show.add_argument("--location", choices=location_ids, default=location_ids[0])

    shift = sub.add_parser("set-shift", help="Set one lunch/dinner shift count.")
    shift.add_argument("role")
    shift.add_argument("day")
    shift.add_argument("period", choices=PERIODS)
    shift.add_argument("value")

    on_hand = sub.add_parser("set-on-hand", help="Set current headcount for a role.")
    on_hand.add_argument("role")
    on_hand.add_argument("value")

    volume = sub.add_parser("set-volume", help="Set the volume multiplier (%%).")
    volume.add_argument("percent")

    export = sub.add_parser("export", help="Write the CSV export.")
    export.add_argument("--location", choices=location_ids, default=location_ids[0])
    export.add_argument("--out", type=Path, default=None)
    export.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Date stamped into the file name (YYYY-MM-DD, default: today).",
    )

    chart = sub.add_parser("chart", help="Render the staffing overview chart.")
    chart.add_argument("--out", type=Path, default=None)
    chart.add_argument("--no-show", action="store_true")

    return parser.parse_args(argv)


def run_command(args: argparse.Namespace) -> int:
    store = build_store(args.state_file, args.roles)
    out_dir = store.cfg.OUTPUT_DIR

    if args.command == "show":
        render_summary(
            store.state,
            store.aggregate_totals(),
            find_location(args.location),
            role=args.role,
        )

    elif args.command in ("set-shift", "set-on-hand", "set-volume"):
        if args.command == "set-volume":
            accepted = (
                parse_volume(args.percent, store.cfg.VOLUME_MIN, store.cfg.VOLUME_MAX)
                is not None
            )
        else:
            accepted = parse_count(args.value) is not None
        if args.command == "set-shift":
            store.set_shift_count(args.role, args.day, args.period, args.value)
        elif args.command == "set-on-hand":
            store.set_on_hand(args.role, args.value)
        else:
            store.set_volume(args.percent)
        if not accepted:
            print("Value rejected; state unchanged.")
            return 1
        print("Saved.")

    elif args.command == "export":
        path = write_export(
            store.state,
            find_location(args.location),
            out_dir=args.out or out_dir,
            on=args.date,
        )
        print(f"Wrote {path}")

    elif args.command == "chart":
        path = show_staffing_overview(
            store.state, out_dir=args.out or out_dir, show=not args.no_show
        )
        if path is not None:
            print(f"Wrote {path}")

    else:
        raise SystemExit(f"Unknown command {args.command}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        return run_command(args)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    raise SystemExit(main())
