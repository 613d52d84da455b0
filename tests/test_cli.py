from __future__ import annotations

import pytest

from pfname.cli import build_parser, dispatch


def run(argv):
    dispatch(build_parser().parse_args(argv))


def test_id_command(capsys):
    run(["id", "Publisher Software"])
    assert capsys.readouterr().out == "zj75k085cmj1a\n"


def test_family_command(capsys):
    run(["family", "AppName", "Publisher Software"])
    assert capsys.readouterr().out == "AppName_zj75k085cmj1a\n"


def test_parse_command(capsys):
    run(["parse", "Microsoft.PowerShell_8wekyb3d8bbwe"])
    assert capsys.readouterr().out == "name\tMicrosoft.PowerShell\npublisher_id\t8wekyb3d8bbwe\n"


def test_parse_command_rejects_invalid(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run(["parse", "NoSeparatorHere"])
    assert excinfo.value.code == 2
    assert "underscore" in capsys.readouterr().err


def test_batch_command(tmp_path):
    manifest = tmp_path / "manifest.tsv"
    manifest.write_text(
        "name\tpublisher\texpected\nAppName\tPublisher Software\tAppName_zj75k085cmj1a\n",
        encoding="utf-8",
    )
    out = tmp_path / "out" / "families.csv"
    summary = tmp_path / "out" / "summary.txt"
    run(["-q", "batch", "--manifest", str(manifest), "--out", str(out), "--emit", "csv", "--summary", str(summary), "--strict"])
    assert "AppName_zj75k085cmj1a" in out.read_text(encoding="utf-8")
    assert "match\t1" in summary.read_text(encoding="utf-8")


def test_batch_command_strict_failure(tmp_path):
    manifest = tmp_path / "manifest.tsv"
    manifest.write_text(
        "name\tpublisher\texpected\nAppName\tPublisher Software\tAppName_8wekyb3d8bbwe\n",
        encoding="utf-8",
    )
    with pytest.raises(SystemExit):
        run(["-q", "batch", "--manifest", str(manifest), "--out", str(tmp_path / "out.tsv"), "--strict"])
