"""
MIT License

Resolve Package Family Names for every row of a manifest table.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from .errors import ValidationError
from .family_name import PackageFamilyName
from ..io.manifest import read_manifest
from ..util.logging import get_logger

LOGGER = get_logger()

RESULT_COLUMNS = [
    "name",
    "publisher",
    "publisher_id",
    "package_family_name",
    "expected",
    "status",
    "note",
]

STATUS_OK = "ok"
STATUS_MATCH = "match"
STATUS_MISMATCH = "mismatch"
STATUS_INVALID = "invalid"
FAILING_STATUSES = {STATUS_MISMATCH, STATUS_INVALID}


@dataclass
class BatchConfig:
    manifest: str
    out: str
    emit: str = "tsv"
    strict: bool = False
    summary: Optional[str] = None


@dataclass
class BatchResult:
    config: BatchConfig
    table: pd.DataFrame
    status_counts: Dict[str, int]

    @property
    def failed(self) -> int:
        return sum(self.status_counts.get(status, 0) for status in FAILING_STATUSES)


def _check_expected(family_name: PackageFamilyName, expected: str) -> tuple[str, str]:
    if not expected:
        return STATUS_OK, ""
    try:
        parsed = PackageFamilyName.parse(expected)
    except ValidationError as exc:
        return STATUS_INVALID, str(exc)
    if parsed == family_name:
        return STATUS_MATCH, ""
    return STATUS_MISMATCH, f"computed {family_name}"


def resolve_rows(manifest: pd.DataFrame) -> pd.DataFrame:
    """Compute the family name of each manifest row and verify expectations."""
    rows: List[Dict[str, object]] = []
    for _, row in manifest.iterrows():
        family_name = PackageFamilyName.from_publisher(row["name"], row["publisher"])
        expected = row.get("expected", "") or ""
        status, note = _check_expected(family_name, expected)
        if status in FAILING_STATUSES:
            LOGGER.warning("%s: %s (%s)", row["name"], status, note)
        rows.append(
            {
                "name": row["name"],
                "publisher": row["publisher"],
                "publisher_id": family_name.publisher_id,
                "package_family_name": family_name,
                "expected": expected,
                "status": status,
                "note": note,
            }
        )
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def summary_lines(result: BatchResult) -> List[str]:
    lines = [f"rows\t{len(result.table)}"]
    for status in (STATUS_OK, STATUS_MATCH, STATUS_MISMATCH, STATUS_INVALID):
        lines.append(f"{status}\t{result.status_counts.get(status, 0)}")
    return lines


def run_batch(config: BatchConfig) -> BatchResult:
    """Read the manifest named by ``config`` and resolve all of its rows."""

    LOGGER.info("Resolving manifest %s", config.manifest)
    manifest = read_manifest(Path(config.manifest))
    table = resolve_rows(manifest)
    status_counts = dict(Counter(table["status"]))
    LOGGER.info("Resolved %d rows", len(table))
    return BatchResult(config=config, table=table, status_counts=status_counts)


__all__ = [
    "BatchConfig",
    "BatchResult",
    "RESULT_COLUMNS",
    "resolve_rows",
    "run_batch",
    "summary_lines",
]
