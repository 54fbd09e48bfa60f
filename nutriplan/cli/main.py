"""Command line entry point: compute profile metrics as JSON.

Usage:
    nutriplan --weight 70 --height 170 --age 25 --gender male \\
        [--body-fat 20] [--activity moderate] [--deficit 500] [--target-body-fat 13]

Exit codes:
    0 success
    2 invalid arguments or body metrics out of range
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from nutriplan.application.nutrition_targets.commands.calculate_profile_metrics import (
    CalculateProfileMetricsCommand,
    CalculateProfileMetricsHandler,
)
from nutriplan.domain.nutrition_targets.core.exceptions.domain_errors import (
    InvalidMetricsError,
    InvalidTargetError,
)
from nutriplan.domain.nutrition_targets.core.value_objects.activity_level import (
    ActivityLevel,
)
from nutriplan.infrastructure.config import (
    get_default_deficit,
    get_target_body_fat,
    load_environment,
)
from nutriplan.infrastructure.logging_config import configure_logging

from .schemas import ProfileMetricsRequest, ProfileMetricsResponse

EXIT_OK = 0
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nutriplan",
        description="Calculate daily calorie and macro targets from body metrics.",
    )
    parser.add_argument("--weight", required=True, help="body weight in kg")
    parser.add_argument("--height", required=True, help="height in cm")
    parser.add_argument("--age", required=True, help="age in years")
    parser.add_argument("--gender", required=True, choices=["male", "female"])
    parser.add_argument("--body-fat", dest="body_fat_percent", default="20", help="body fat %%")
    parser.add_argument(
        "--activity",
        dest="activity_level",
        default=ActivityLevel.MODERATE.value,
        choices=[level.value for level in ActivityLevel],
    )
    parser.add_argument("--deficit", default=None, help="daily calorie deficit in kcal")
    parser.add_argument(
        "--target-body-fat", dest="target_body_fat", default=None, help="target body fat %%"
    )
    parser.add_argument("--log-level", dest="log_level", default=None)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_environment()
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level)

    try:
        request = ProfileMetricsRequest(
            weight=args.weight,
            height=args.height,
            age=args.age,
            gender=args.gender,
            body_fat_percent=args.body_fat_percent,
            activity_level=args.activity_level,
            deficit=args.deficit if args.deficit is not None else get_default_deficit(),
            target_body_fat=(
                args.target_body_fat
                if args.target_body_fat is not None
                else get_target_body_fat()
            ),
        )
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            print(f"{field}: {error['msg']}", file=sys.stderr)
        return EXIT_INVALID

    command = CalculateProfileMetricsCommand(
        metrics=request.to_metric_input(),
        activity_level=request.activity_level,
        deficit=request.deficit,
        target_body_fat=request.target_body_fat,
    )

    try:
        calculations = CalculateProfileMetricsHandler().handle(command)
    except InvalidMetricsError as e:
        for message in e.errors:
            print(message, file=sys.stderr)
        return EXIT_INVALID
    except InvalidTargetError as e:
        print(str(e), file=sys.stderr)
        return EXIT_INVALID

    response = ProfileMetricsResponse.from_calculations(calculations)
    print(response.model_dump_json(indent=2))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
