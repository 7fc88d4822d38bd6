from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from shrinkage.config import FIELD_SEPARATOR, FIELDS_PER_LINE
from .measurement import Measurement

logger = logging.getLogger(__name__)

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent.
_FLOAT_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class RejectedLine:
    line_no: int
    text: str
    reason: str


@dataclass
class LoadResult:
    measurements: List[Measurement] = field(default_factory=list)
    rejected: List[RejectedLine] = field(default_factory=list)


def parse_float(token: str) -> Optional[float]:
    """Parse a decimal floating-point token; return None if it is not one."""

    if not _FLOAT_RE.fullmatch(token):
        return None
    value = float(token)
    # Out-of-range tokens such as 1e400 overflow to inf.
    if math.isinf(value):
        return None
    return value


def _strip_line_ending(raw: str) -> str:
    line = raw[:-1] if raw.endswith("\n") else raw
    return line[:-1] if line.endswith("\r") else line


def load_measurements(lines: Iterable[str]) -> LoadResult:
    """Parse "<expected> <actual>" lines into Measurements.

    Malformed lines are reported on stdout and skipped; they never abort the
    scan. Input order is preserved.
    """

    result = LoadResult()

    def _reject(line_no: int, text: str, reason: str, message: str) -> None:
        print(message)
        result.rejected.append(RejectedLine(line_no=line_no, text=text, reason=reason))

    for line_no, raw in enumerate(lines, start=1):
        line = _strip_line_ending(raw)
        parts = line.split(FIELD_SEPARATOR)
        if len(parts) != FIELDS_PER_LINE:
            _reject(line_no, line, "field_count", f"Invalid line: {line}")
            continue

        expected = parse_float(parts[0])
        if expected is None:
            _reject(line_no, line, "expected_not_numeric", f"Error parsing expected value: {parts[0]}")
            continue
        actual = parse_float(parts[1])
        if actual is None:
            _reject(line_no, line, "actual_not_numeric", f"Error parsing actual value: {parts[1]}")
            continue
        if expected == 0:
            _reject(line_no, line, "expected_zero", f"Invalid expected value: {parts[0]}")
            continue

        result.measurements.append(Measurement(expected=expected, actual=actual))

    logger.debug(
        "Parsed %s measurements; rejected %s lines", len(result.measurements), len(result.rejected)
    )
    return result


def read_measurements(path: Path) -> LoadResult:
    """Load measurements from a text file. I/O errors propagate."""

    logger.info("Loading measurements: %s", path)
    # Lines end at "\n" only; undecodable bytes become U+FFFD and fail parsing on their own line.
    with path.open(encoding="utf-8", errors="replace", newline="\n") as handle:
        result = load_measurements(handle)
    logger.info("Loaded %s measurements from %s", len(result.measurements), path)
    return result
