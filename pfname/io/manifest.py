"""
MIT License

Package manifest handling.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

REQUIRED_COLUMNS = ["name", "publisher"]
OPTIONAL_COLUMNS = ["expected"]


def read_manifest(path: str | Path) -> pd.DataFrame:
    manifest_path = Path(path)
    df = pd.read_csv(manifest_path, sep="\t", dtype=str, keep_default_na=False).fillna("")
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Manifest missing columns: {', '.join(missing)}")
    for col in OPTIONAL_COLUMNS:
        if col not in df.columns:
            df[col] = ""
    return df


__all__ = ["read_manifest", "REQUIRED_COLUMNS", "OPTIONAL_COLUMNS"]
