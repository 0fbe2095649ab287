#!/usr/bin/env python3
"""generate_schedule.py: Build a round-robin calendar from a team CSV.

Usage:
    python scripts/generate_schedule.py data/teams.csv --start-date 2025-01-06
    python scripts/generate_schedule.py data/teams.csv --config config/schedule.json
    python scripts/generate_schedule.py data/teams.csv --start-date 2025-01-06 \\
        --format single --days-between 3 --time-slot 18:00 --time-slot 20:00 \\
        --output schedule.csv

Exit codes: 0 valid schedule, 1 bad input or configuration, 2 schedule
generated but failed validation.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from matchday.utils.runtime import cli_features, validate_runtime

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger("schedule")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="matchday: round-robin schedule generator")
    parser.add_argument("teams", help="CSV file with one team per row (id/name/venue columns)")
    parser.add_argument("--config", default=None, help="Path to schedule JSON config")
    parser.add_argument("--start-date", default=None, help="Date of round 1 (YYYY-MM-DD)")
    parser.add_argument(
        "--format", default=None, choices=["single", "double"],
        help="Single or double round-robin (default: double)",
    )
    parser.add_argument("--days-between", type=int, default=None, help="Days between rounds")
    parser.add_argument(
        "--time-slot", action="append", default=None, dest="time_slots",
        help="Kick-off time label, e.g. 18:00; repeat for several slots",
    )
    parser.add_argument(
        "--per-round-slots", action="store_true",
        help="Restart the time-slot rotation at every round",
    )
    parser.add_argument("--seed", type=int, default=None, help="Randomize home/away with this seed")
    parser.add_argument("--output", "-o", default=None, help="Write the schedule to this CSV file")
    parser.add_argument("--quiet", "-q", action="store_true", help="Minimal output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        validate_runtime(cli_features(args.output))
    except RuntimeError as exc:
        logger.error(str(exc))
        return 1

    import pandas as pd

    from matchday.config import load_config
    from matchday.engine import plan_schedule, recommend
    from matchday.errors import SchedulingError
    from matchday.importers import load_teams
    from matchday.models import SlotPolicy

    try:
        teams = load_teams(args.teams)
        config = load_config(
            args.config,
            start_date=args.start_date,
            format=args.format,
            days_between_rounds=args.days_between,
            time_slots=args.time_slots,
            slot_policy=SlotPolicy.PER_ROUND if args.per_round_slots else None,
            seed=args.seed,
        )
        plan = plan_schedule(teams, config)
    except (FileNotFoundError, SchedulingError) as exc:
        logger.error(str(exc))
        return 1

    if not args.quiet:
        print()
        print("=" * 72)
        print(
            f"  {config.format.value.upper()} ROUND-ROBIN: {len(teams)} teams, "
            f"{len(plan.matches)} matches, {plan.total_rounds} rounds"
        )
        print("=" * 72)
        print(f"  {'Rd':>3}  {'Date':<10} {'Time':<5}  {'Home':<22} {'Away':<22} Venue")
        print("  " + "-" * 70)
        for match in plan.matches:
            print(
                f"  {match.round:>3}  {match.date.isoformat():<10} {match.time:<5}  "
                f"{match.home.display_name:<22} {match.away.display_name:<22} {match.venue}"
            )
        print()
        for rec in recommend(plan.summary, plan.report, config.unassigned_venue):
            print(f"  [{rec.level.upper()}] {rec.title}: {rec.action}")
            for issue in rec.issues:
                print(f"      - {issue}")
        print()

    if args.output:
        df = pd.DataFrame([m.to_record() for m in plan.matches])
        df.to_csv(args.output, index=False)
        logger.info("Wrote %d matches to %s", len(df), args.output)

    return 0 if plan.is_valid else 2


if __name__ == "__main__":
    sys.exit(main())
