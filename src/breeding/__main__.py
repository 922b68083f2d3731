"""CLI entry point for breeding analysis.

Usage:
    python -m src.breeding --sire "Into Mischief" --starts 0 \
        --surface dirt --distance 6f
    python -m src.breeding --line "Tapit - Stellar Wind, by Curlin" \
        --surface dirt --distance "1 1/8m" --detailed
    python -m src.breeding --input entries.csv --output scores.csv
"""

from __future__ import annotations

import argparse
import json
import sys

from src.breeding.engine import (
    analyze_horse_sires_sire,
    breeding_score_display,
    calculate_detailed_breeding_score,
)
from src.breeding.errors import BreedingInputError, ReferenceDataError
from src.breeding.extractor import parse_breeding_line
from src.breeding.types import HorseEntry, RaceHeader
from src.breeding.weighting import calculate_breeding_contribution, get_breeding_weight
from src.common.logging import get_logger, setup_logging

logger = get_logger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Optional argument list (defaults to sys.argv[1:]).

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        description="Breeding-based scoring for lightly raced horses",
        prog="python -m src.breeding",
    )
    horse = parser.add_argument_group("single horse")
    horse.add_argument("--sire", default=None, help="Sire name")
    horse.add_argument("--dam", default=None, help="Dam name")
    horse.add_argument("--damsire", default=None, help="Damsire (broodmare sire) name")
    horse.add_argument("--sires-sire", default=None, help="Sire's sire name")
    horse.add_argument(
        "--line",
        default=None,
        help='Breeding line such as "Sire - Dam, by Damsire" (overrides names)',
    )
    horse.add_argument(
        "--starts",
        type=int,
        default=0,
        help="Lifetime starts (default: 0, a debut runner)",
    )
    horse.add_argument(
        "--detailed",
        action="store_true",
        help="Include per-role profiles, tier badges and bonus reasons",
    )

    race = parser.add_argument_group("race")
    race.add_argument("--surface", default="", help="Race surface (dirt, turf, synthetic)")
    race.add_argument("--distance", default="", help='Race distance (e.g. "6f", "1 1/8m")')

    batch = parser.add_argument_group("batch")
    batch.add_argument(
        "--input",
        type=str,
        default=None,
        help="CSV of entries with sire, dam, damsire, lifetime_starts, surface, distance",
    )
    batch.add_argument(
        "--output",
        type=str,
        default=None,
        help="CSV path for scored entries (default: print to stdout)",
    )

    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )
    return parser.parse_args(argv)


def _score_single(args: argparse.Namespace) -> dict[str, object]:
    sire, dam, damsire = args.sire, args.dam, args.damsire
    if args.line:
        parsed = parse_breeding_line(args.line)
        for warning in parsed.warnings:
            logger.warning("Breeding line", warning=warning, line=args.line)
        sire, dam, damsire = parsed.sire, parsed.dam, parsed.damsire

    horse = HorseEntry(
        sire=sire,
        dam=dam,
        damsire=damsire,
        lifetime_starts=args.starts,
        sires_sire=args.sires_sire,
    )
    race = RaceHeader(surface=args.surface, distance=args.distance)

    detailed = calculate_detailed_breeding_score(horse, race)
    sires_sire = analyze_horse_sires_sire(horse, race)

    output = detailed.to_dict() if args.detailed else detailed.score.to_dict()
    output["weight"] = get_breeding_weight(args.starts)
    output["contribution"] = calculate_breeding_contribution(
        detailed.score, args.starts, sires_sire
    )
    if args.detailed:
        display = breeding_score_display(detailed)
        output["display"] = {
            "label": display.label,
            "color": display.color,
            "description": display.description,
        }
        output["sires_sire"] = sires_sire.to_dict()
    return output


def _score_batch(input_path: str, output_path: str | None) -> int:
    import polars as pl

    from src.feature_engineering.extractors.breeding_features import (
        BreedingFeatureExtractor,
    )

    df = pl.read_csv(input_path)
    scored = BreedingFeatureExtractor().extract(df)

    if output_path:
        scored.write_csv(output_path)
    else:
        print(scored)

    logger.info("Batch scoring complete", rows=scored.height, output=output_path)
    return scored.height


def main(argv: list[str] | None = None) -> int:
    """Run the breeding CLI.

    Args:
        argv: Optional argument list for testing.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = _parse_args(argv)
    setup_logging(level=args.log_level)

    try:
        if args.input:
            _score_batch(args.input, args.output)
        else:
            print(json.dumps(_score_single(args), indent=2, ensure_ascii=False))
    except BreedingInputError as e:
        logger.error("Invalid input", error=str(e))
        return 1
    except ReferenceDataError as e:
        logger.error("Reference data unavailable", error=str(e))
        return 1
    except OSError as e:
        logger.error("Cannot read or write entries", error=str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
