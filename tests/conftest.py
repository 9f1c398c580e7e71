# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path

import pytest

from po_split.logging.init import reset_logging

HEADER = "Po,StyleCode,ColorCode,MsrpSize,StyleDesc,ColorDesc,Upc,StoreNum,Qty"


def make_line(po: str, style_desc: str = "CREW TEE", qty: str = "1", upc: str = "000111222333") -> str:
    """One input CSV line with the given key / description / quantity."""
    return f"{po},ST1001,001,M,{style_desc},BLACK,{upc},014,{qty}"


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "out").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("PO_SPLIT_CONFIG", raising=False)
        reset_logging()
        yield p
        reset_logging()


@pytest.fixture()
def write_orders(temp_workdir: Path):
    """Write an orders CSV (header added) and return its path."""
    def _write(lines: list[str], name: str = "orders.csv", header: str = HEADER) -> Path:
        path = temp_workdir / "data" / name
        path.write_text("\n".join([header, *lines]) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture()
def write_store_list(temp_workdir: Path):
    def _write(text: str, name: str = "stores.txt") -> Path:
        path = temp_workdir / "data" / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture()
def sample_orders(write_orders) -> Path:
    return write_orders([
        make_line("4500-014", "CREW TEE$", "10", upc="100000000001"),
        make_line("4500-014", "CREW TEE", "5", upc="100000000002"),
        make_line("4500-071", "HOODIE", "30", upc="100000000003"),
        make_line("4500-1014", "POLO$", "7", upc="100000000004"),
        make_line("4500-123", "JOGGER$", "40", upc="100000000005"),
        make_line("4500-071", "HOODIE$", "31", upc="100000000006"),
    ])


@pytest.fixture()
def sample_config_yaml() -> str:
    return """marker: "$"
box_size: 60
key_separator: "-"
encoding: utf-8
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "po_split.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg
