from __future__ import annotations

import json

import pandas as pd
import pytest

from pfname.core.batch import BatchConfig, resolve_rows, run_batch, summary_lines
from pfname.io.manifest import read_manifest
from pfname.io.tsv import write_table

MANIFEST = (
    "name\tpublisher\texpected\n"
    "AppName\tPublisher Software\t\n"
    "AppName\tPublisher Software\tappname_ZJ75K085CMJ1A\n"
    "Other\tPublisher Software\tOther_8wekyb3d8bbwe\n"
    "Broken\tPublisher Software\tBrokenValue\n"
)


@pytest.fixture
def manifest_path(tmp_path):
    path = tmp_path / "manifest.tsv"
    path.write_text(MANIFEST, encoding="utf-8")
    return path


def test_read_manifest_requires_columns(tmp_path):
    path = tmp_path / "bad.tsv"
    path.write_text("name\nAppName\n", encoding="utf-8")
    with pytest.raises(ValueError, match="publisher"):
        read_manifest(path)


def test_read_manifest_adds_expected_column(tmp_path):
    path = tmp_path / "plain.tsv"
    path.write_text("name\tpublisher\nAppName\tPublisher Software\n", encoding="utf-8")
    df = read_manifest(path)
    assert list(df["expected"]) == [""]


def test_resolve_rows():
    manifest = pd.DataFrame(
        [{"name": "AppName", "publisher": "Publisher Software", "expected": ""}]
    )
    table = resolve_rows(manifest)
    assert str(table.loc[0, "package_family_name"]) == "AppName_zj75k085cmj1a"
    assert str(table.loc[0, "publisher_id"]) == "zj75k085cmj1a"
    assert table.loc[0, "status"] == "ok"


def test_run_batch_statuses(manifest_path, tmp_path):
    result = run_batch(BatchConfig(manifest=str(manifest_path), out=str(tmp_path / "out.tsv")))
    assert list(result.table["status"]) == ["ok", "match", "mismatch", "invalid"]
    assert result.failed == 2
    assert "underscore" in result.table.loc[3, "note"]
    assert summary_lines(result) == ["rows\t4", "ok\t1", "match\t1", "mismatch\t1", "invalid\t1"]


def test_write_table_formats(manifest_path, tmp_path):
    result = run_batch(BatchConfig(manifest=str(manifest_path), out=str(tmp_path / "out.tsv")))

    tsv_path = tmp_path / "out.tsv"
    write_table(result.table, tsv_path, fmt="tsv")
    written = pd.read_csv(tsv_path, sep="\t", dtype=str, keep_default_na=False)
    assert written.loc[0, "package_family_name"] == "AppName_zj75k085cmj1a"

    jsonl_path = tmp_path / "out.jsonl"
    write_table(result.table, jsonl_path, fmt="jsonl")
    records = [json.loads(line) for line in jsonl_path.read_text(encoding="utf-8").splitlines()]
    assert records[0]["publisher_id"] == "zj75k085cmj1a"
    assert len(records) == 4

    with pytest.raises(ValueError):
        write_table(result.table, tmp_path / "out.xml", fmt="xml")
