#!/usr/bin/env python3
"""Dataset generation script for performance testing.

Generates synthetic cart CSV files in the expected format:
- Line 1: `Product name,Price,Quantity`
- Line 2+: one cart item per line

Optionally injects invalid rows (negative quantity, empty name, short row)
to exercise the validator on large inputs.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

HEADER = ["Product name", "Price", "Quantity"]
WORDS = ["Mollis", "consequat", "Tvoluptatem", "Scelerisque", "lacinia", "Consectetur",
         "adipiscing", "Condimentum", "aliquet", "Lorem", "ipsum", "dolor"]


def generate_cart_data(rows: int, seed: int = 42) -> pd.DataFrame:
    """Generate a DataFrame of synthetic cart items.

    Args:
        rows: Number of item rows to generate
        seed: Random seed for reproducible data

    Returns:
        DataFrame with the three cart columns (prices formatted with 2 decimals)
    """
    rng = np.random.default_rng(seed)
    first = rng.choice(WORDS, rows)
    second = rng.choice(WORDS, rows)
    return pd.DataFrame({
        "Product name": [f"{a} {b}" for a, b in zip(first, second)],
        "Price": [f"{p:.2f}" for p in rng.uniform(0.01, 999.99, rows)],
        "Quantity": rng.integers(1, 20, rows),
    })


def create_cart_file(output_path: Path, rows: int, invalid_rows: int = 0, seed: int = 42) -> None:
    """Write a synthetic cart CSV, optionally with some invalid rows."""
    df = generate_cart_data(rows, seed)
    if invalid_rows:
        rng = np.random.default_rng(seed + 1)
        df = df.astype(object)
        for idx in rng.choice(rows, size=min(invalid_rows, rows), replace=False):
            kind = idx % 3
            if kind == 0:
                df.at[idx, "Quantity"] = -1
            elif kind == 1:
                df.at[idx, "Product name"] = ""
            else:
                df.at[idx, "Price"] = "n/a"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False, header=HEADER, lineterminator="\n")

    print(f"Created cart file: {output_path}")
    print(f"  Rows: {rows} (+ 1 header row)")
    print(f"  Invalid rows: {invalid_rows}")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate synthetic cart CSV datasets for performance testing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate default 50k rows
  %(prog)s data/large_cart.csv

  # Generate 10k rows with 25 invalid ones
  %(prog)s data/broken_cart.csv --rows 10000 --invalid-rows 25
        """
    )
    parser.add_argument("output", type=Path, help="Output CSV path")
    parser.add_argument("--rows", type=int, default=50_000, help="Number of item rows (default: 50000)")
    parser.add_argument("--invalid-rows", type=int, default=0, help="Number of rows to corrupt (default: 0)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1

    try:
        create_cart_file(args.output, args.rows, args.invalid_rows, args.seed)
    except OSError as e:
        print(f"Error creating cart file: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
