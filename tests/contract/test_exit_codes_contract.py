from __future__ import annotations

from pathlib import Path

from po_split.cli import main as cli_main

"""Exit code contract: 0 success, 1 fatal (config / pipeline), 2 missing required value."""


def test_exit_code_success_split(temp_workdir: Path, sample_orders: Path, write_store_list):
    stores = write_store_list("014")
    assert cli_main(["-i", str(sample_orders), "-o", "out", "-l", str(stores)]) == 0


def test_exit_code_success_report_without_matches(temp_workdir: Path, sample_orders: Path, write_store_list, capsys):
    stores = write_store_list("999")
    assert cli_main(["--report", "-i", str(sample_orders), "-l", str(stores)]) == 0
    assert "SUMMARY stores=0 labels=0 tagged=0 untagged=0 boxes=0" in capsys.readouterr().out


def test_exit_code_missing_input_file(temp_workdir: Path, write_store_list, capsys):
    stores = write_store_list("014")
    code = cli_main(["-i", "data/missing.csv", "-o", "out", "-l", str(stores)])
    assert code == 1
    assert "ERROR split: cannot open input file" in capsys.readouterr().out


def test_exit_code_missing_store_list_file(temp_workdir: Path, sample_orders: Path, capsys):
    code = cli_main(["--report", "-i", str(sample_orders), "-l", "data/missing.txt"])
    assert code == 1
    assert "ERROR report: cannot read store list" in capsys.readouterr().out


def test_exit_code_malformed_input(temp_workdir: Path, write_orders, write_store_list, capsys):
    orders = write_orders(["A-014,ST1,001,M"])
    stores = write_store_list("014")
    code = cli_main(["-i", str(orders), "-o", "out", "-l", str(stores)])
    assert code == 1
    assert "ERROR split:" in capsys.readouterr().out
    assert list((temp_workdir / "out").iterdir()) == []


def test_exit_code_required_value_missing(temp_workdir: Path):
    assert cli_main([]) == 2
