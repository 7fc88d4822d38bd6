from __future__ import annotations

import argparse
import logging
import os
import platform
import sys
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from shrinkage.config import RUN_NAMESPACE, TRACKED_PACKAGES  # noqa: E402
from shrinkage.data.ingest import read_measurements  # noqa: E402
from shrinkage.data.measurement import measurements_to_frame  # noqa: E402
from shrinkage.data.validate import EmptyDatasetError  # noqa: E402
from shrinkage.evaluation.estimate import estimate_shrinkage  # noqa: E402
from shrinkage.reporting.report import format_report  # noqa: E402
from shrinkage.utils.logging import package_versions, sha256_file, write_json  # noqa: E402

logger = logging.getLogger("estimate_shrinkage")


class UsageArgumentParser(argparse.ArgumentParser):
    """Print usage on stdout and exit with status 1 on bad arguments."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stdout)
        print(f"{self.prog}: error: {message}")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = UsageArgumentParser(
        description="Estimate the least deviating shrinkage and adjustment of expected/actual measurement pairs."
    )
    parser.add_argument(
        "input",
        type=Path,
        help='Text file with one "<expected> <actual>" pair per line. Put "--" before a path that starts with "-".',
    )
    parser.add_argument("--audit-csv", type=Path, default=None, help="Optional: write per-measurement table.")
    parser.add_argument("--decisions-json", type=Path, default=None, help="Optional: write run metadata JSON.")
    parser.add_argument("--figure", type=Path, default=None, help="Optional: write shrinkage deviation figure (PNG).")
    parser.add_argument("--verbose", action="store_true", help="Log progress to stderr.")
    return parser


def _write_figure(path: Path, shrinkages: List[float], estimate) -> None:
    _mpl_cache_dir = Path(tempfile.gettempdir()) / "matplotlib"
    _mpl_cache_dir.mkdir(parents=True, exist_ok=True)
    os.environ.setdefault("MPLCONFIGDIR", str(_mpl_cache_dir))

    from shrinkage.reporting.figures import plot_deviation_summary

    plot_deviation_summary(shrinkages, estimate.shrinkage_summary, path, title="Shrinkage: Mean vs Median")


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )

    if not args.input.exists():
        raise SystemExit(f"Input file not found: {args.input}")

    loaded = read_measurements(args.input)
    measurements = loaded.measurements

    try:
        estimate = estimate_shrinkage(measurements)
    except EmptyDatasetError as exc:
        raise SystemExit(f"No valid measurements in {args.input}: {exc}")
    except ValueError as exc:
        raise SystemExit(f"Cannot estimate from {args.input}: {exc}")

    if args.audit_csv is not None:
        args.audit_csv.parent.mkdir(parents=True, exist_ok=True)
        measurements_to_frame(measurements).to_csv(args.audit_csv, index=False)
        logger.info("Wrote %s", args.audit_csv)

    if args.figure is not None:
        _write_figure(args.figure, [m.shrinkage for m in measurements], estimate)
        logger.info("Wrote %s", args.figure)

    if args.decisions_json is not None:
        payload = {
            "run_namespace": RUN_NAMESPACE,
            "input_file": str(args.input),
            "input_sha256": sha256_file(args.input),
            "measurements_loaded": len(measurements),
            "lines_rejected": len(loaded.rejected),
            "rejected_lines": [
                {"line_no": r.line_no, "text": r.text, "reason": r.reason} for r in loaded.rejected
            ],
            "estimates": estimate.to_dict(),
            "runtime": {
                "timestamp_utc": datetime.now(timezone.utc).isoformat(),
                "python_version": sys.version,
                "platform": platform.platform(),
                "argv": sys.argv,
                "packages": package_versions(TRACKED_PACKAGES),
            },
        }
        write_json(args.decisions_json, payload)
        logger.info("Wrote %s", args.decisions_json)

    print(format_report(estimate.shrinkage, estimate.adjustment, estimate.simulated_adjustment))


if __name__ == "__main__":
    main()
