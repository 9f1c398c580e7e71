from __future__ import annotations

from pathlib import Path

import pandas as pd

from conftest import make_line
from po_split.cli import main as cli_main
from po_split.services.orchestrator import run_split

OUTPUT_HEADER = ["Po", "StyleCode", "ColorCode", "MsrpSize", "StyleDesc", "ColorDesc", "Upc", "StoreNum", "Qty"]


def _read(path: Path) -> pd.DataFrame:
    return pd.read_csv(path, dtype=str, keep_default_na=False)


def test_split_writes_one_file_per_matched_store(temp_workdir: Path, sample_orders: Path, write_store_list):
    stores = write_store_list("014,071,999\n")
    out_dir = temp_workdir / "out"

    result = run_split(sample_orders, out_dir, stores)

    assert [p.name for p in result.written_files] == ["4500-014.csv", "4500-071.csv"]
    assert sorted(p.name for p in out_dir.iterdir()) == ["4500-014.csv", "4500-071.csv"]
    # "4500-1014" does not belong to store 014
    df = _read(out_dir / "4500-014.csv")
    assert list(df.columns) == OUTPUT_HEADER
    assert df["Upc"].tolist() == ["100000000001", "100000000002"]
    assert df["Qty"].tolist() == ["0", "5"]
    assert (df["StoreNum"] == "").all()

    df71 = _read(out_dir / "4500-071.csv")
    assert df71["Qty"].tolist() == ["30", "0"]


def test_split_override_all_keeps_tagged_quantities(temp_workdir: Path, sample_orders: Path, write_store_list):
    stores = write_store_list("014")
    run_split(sample_orders, temp_workdir / "out", stores, override_all=True)
    df = _read(temp_workdir / "out" / "4500-014.csv")
    assert df["Qty"].tolist() == ["10", "5"]
    assert (df["StoreNum"] == "").all()


def test_split_duplicate_identifier_duplicates_lines(temp_workdir: Path, write_orders, write_store_list):
    orders = write_orders([make_line("X-01", "TEE", "3")])
    stores = write_store_list("01,01")
    run_split(orders, temp_workdir / "out", stores)
    lines = (temp_workdir / "out" / "X-01.csv").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3
    assert lines[1] == lines[2]


def test_split_no_matches_writes_nothing(temp_workdir: Path, sample_orders: Path, write_store_list):
    stores = write_store_list("999")
    result = run_split(sample_orders, temp_workdir / "out", stores)
    assert result.written_files == []
    assert list((temp_workdir / "out").iterdir()) == []


def test_cli_split_end_to_end(temp_workdir: Path, sample_orders: Path, write_store_list, capsys):
    stores = write_store_list("014,123")
    code = cli_main(["-i", str(sample_orders), "-o", "out", "-l", str(stores)])
    out = capsys.readouterr().out
    assert code == 0
    assert "SUMMARY files=2 rows=3 tagged=2 zeroed=2" in out
    assert "INFO Success!" in out
    assert (temp_workdir / "out" / "4500-123.csv").exists()
