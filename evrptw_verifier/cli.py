"""Command line entry point: verify one or more solution files against an EVRPTW instance."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from pydantic import ValidationError

from .agents import RouteVerifier
from .coverage import check_coverage
from .errors import InstanceFormatError, SolutionFormatError
from .loaders import load_instance, load_solution
from .models import VerifierConfig
from .report import format_coverage, format_result, format_verdict

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="evrptw-verify",
        description="Check feasibility and cost of EVRPTW solutions against an instance file.",
    )
    parser.add_argument("-d", "--detailed", action="store_true",
                        help="Print per-route diagnostics and the true vs. declared cost.")
    parser.add_argument("instance", type=Path, help="Instance file (Schneider et al. format).")
    parser.add_argument("solutions", type=Path, nargs="+", help="One or more solution files.")
    parser.add_argument("--max-vehicles", type=int, help="Override the fleet size limit (default 12).")
    parser.add_argument("--cost-tolerance", type=float, default=1e-3,
                        help="Accepted absolute difference between declared and true cost.")
    parser.add_argument("--recharge-policy", choices=("rate", "inverse_rate"), default="rate",
                        help="Interpret the station rate as energy per time (rate) or time per energy.")
    parser.add_argument("--cost-model", choices=("distance_plus_fixed", "distance"),
                        default="distance_plus_fixed", help="How the true cost is recomputed.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def config_from_args(args: argparse.Namespace) -> VerifierConfig:
    return VerifierConfig(
        detailed=args.detailed,
        cost_tolerance=args.cost_tolerance,
        max_vehicles=args.max_vehicles,
        recharge_policy=args.recharge_policy,
        cost_model=args.cost_model,
    )


def run(
    instance_path: Path,
    solution_paths: List[Path],
    cfg: VerifierConfig,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    out = out or sys.stdout
    err = err or sys.stderr
    if instance_path.is_dir() or any(p.is_dir() for p in solution_paths):
        print("Error: instance path and solution paths should be files (not directories ..)", file=err)
        return EXIT_ERROR

    try:
        inst = load_instance(instance_path)
    except FileNotFoundError:
        print(f"Error: couldn't open instance file {instance_path}", file=err)
        return EXIT_ERROR
    except InstanceFormatError as e:
        print(f"Error: error while parsing the instance file ({instance_path}): {e}\n"
              "is this an actual E-VRPTW instance file?", file=err)
        return EXIT_ERROR

    verifier = RouteVerifier(inst, cfg)
    all_valid = True

    for i, path in enumerate(solution_paths, start=1):
        print(f"Solution {i} ({path.name}): ", end="", file=out)
        try:
            solution = load_solution(path, inst)
        except FileNotFoundError:
            print(file=out)
            print(f"Error: couldn't open solution file {path}", file=err)
            return EXIT_ERROR
        except SolutionFormatError as e:
            print(file=out)
            print(f"Error: {e}", file=err)
            return EXIT_ERROR

        coverage = check_coverage(inst, solution.routes)
        valid = False
        if coverage.ok:
            result = verifier.verify(solution.routes, solution.cost, detailed=cfg.detailed, coverage=coverage)
            valid = result.valid
            if cfg.detailed:
                print(file=out)
                print(format_result(result), file=out)
        else:
            print(file=out)
            print(format_coverage(coverage), file=out)

        print(format_verdict(valid), file=out)
        if cfg.detailed:
            print(file=out)
        all_valid = all_valid and valid

    return EXIT_VALID if all_valid else EXIT_INVALID


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        cfg = config_from_args(args)
    except ValidationError as e:
        # exits with status 2 like any other usage error
        parser.error("; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()))
    return run(args.instance, args.solutions, cfg)


if __name__ == "__main__":
    sys.exit(main())
