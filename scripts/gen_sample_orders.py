#!/usr/bin/env python3
"""Sample purchase-order export generator.

Writes a synthetic export in the layout po-split reads:

    Po,StyleCode,ColorCode,MsrpSize,StyleDesc,ColorDesc,Upc,StoreNum,Qty

plus a matching store list, for manual runs and sizing experiments. Roughly a
fifth of the style descriptions end with the "$" tag marker.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

HEADER = ["Po", "StyleCode", "ColorCode", "MsrpSize", "StyleDesc", "ColorDesc", "Upc", "StoreNum", "Qty"]
SIZES = ["XS", "S", "M", "L", "XL", "2XL"]
COLORS = {"001": "BLACK", "100": "WHITE", "410": "NAVY", "600": "RED", "030": "HEATHER GREY"}
STYLES = ["CREW TEE", "PULLOVER HOODIE", "JOGGER", "POLO", "SHORT", "ZIP JACKET"]


def generate_orders(rows: int, stores: list[str], tagged_ratio: float = 0.2, seed: int = 42) -> pd.DataFrame:
    """Generate a DataFrame of PO lines spread over the given store numbers."""
    rng = np.random.default_rng(seed)
    color_codes = list(COLORS)

    store_col = rng.choice(stores, rows)
    style_idx = rng.integers(0, len(STYLES), rows)
    color_col = rng.choice(color_codes, rows)
    tagged = rng.random(rows) < tagged_ratio

    data = {
        "Po": [f"4500{s}-{s}" for s in store_col],
        "StyleCode": [f"ST{1000 + i}" for i in style_idx],
        "ColorCode": color_col.tolist(),
        "MsrpSize": rng.choice(SIZES, rows).tolist(),
        "StyleDesc": [STYLES[i] + ("$" if t else "") for i, t in zip(style_idx, tagged, strict=True)],
        "ColorDesc": [COLORS[c] for c in color_col],
        "Upc": [f"{n:012d}" for n in rng.integers(10**11, 10**12 - 1, rows)],
        "StoreNum": store_col.tolist(),
        "Qty": rng.integers(1, 48, rows).astype(str).tolist(),
    }
    return pd.DataFrame(data, columns=HEADER)


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic purchase-order export and store list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s data/
  %(prog)s data/ --rows 20000 --stores 014 071 123 --seed 7
        """,
    )
    parser.add_argument("output_dir", type=Path, help="Directory for orders.csv and stores.txt")
    parser.add_argument("--rows", type=int, default=1_000, help="Number of PO lines (default: 1,000)")
    parser.add_argument(
        "--stores", nargs="+", default=["014", "071", "123", "010", "100"], help="Store numbers"
    )
    parser.add_argument("--tagged-ratio", type=float, default=0.2, help="Share of tagged items (default: 0.2)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1
    if not 0.0 <= args.tagged_ratio <= 1.0:
        print("Error: --tagged-ratio must be between 0 and 1", file=sys.stderr)
        return 1

    df = generate_orders(args.rows, args.stores, args.tagged_ratio, args.seed)
    args.output_dir.mkdir(parents=True, exist_ok=True)
    orders_path = args.output_dir / "orders.csv"
    list_path = args.output_dir / "stores.txt"
    df.to_csv(orders_path, index=False, lineterminator="\n")
    list_path.write_text(",".join(args.stores) + "\n", encoding="utf-8")

    print(f"Created {orders_path} ({args.rows:,} rows)")
    print(f"Created {list_path} ({len(args.stores)} stores)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
