from __future__ import annotations

import time
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from cart_parser.parser.cart_parser import CartParser
from cart_parser.parser.exceptions import ValidationFailedError

"""Performance smoke test: validate + parse a 50k row cart.

Budgets are lenient so CI stays stable; the point is catching accidental
quadratic behaviour in validation or parsing.
"""

ROWS = 50_000


def generate_cart_csv(path: Path, rows: int = ROWS, seed: int = 7) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    df = pd.DataFrame({
        "Product name": [f"Item {i}" for i in range(rows)],
        "Price": np.round(rng.uniform(0.01, 999.99, rows), 2),
        "Quantity": rng.integers(1, 20, rows),
    })
    df.to_csv(path, index=False, lineterminator="\n")
    return df


def test_parse_throughput(tmp_path: Path):
    path = tmp_path / "large.csv"
    df = generate_cart_csv(path)

    start = time.perf_counter()
    result = CartParser(id_factory=lambda: "id").parse(path)
    elapsed = time.perf_counter() - start

    assert len(result.items) == ROWS
    expected = round(float((df["Price"] * df["Quantity"]).sum()), 2)
    assert result.total == pytest.approx(expected, abs=0.01)
    assert elapsed < 10, f"parse too slow: {elapsed:.3f}s"
    assert ROWS / elapsed > 5_000


def test_validation_of_large_invalid_file(tmp_path: Path):
    path = tmp_path / "broken.csv"
    generate_cart_csv(path)
    with path.open("a", encoding="utf-8") as f:
        f.write("Broken item,-1,1\n")

    parser = CartParser(sink=lambda source, errors: None)
    start = time.perf_counter()
    with pytest.raises(ValidationFailedError):
        parser.parse(path)
    elapsed = time.perf_counter() - start

    errors = parser.validate(path.read_text(encoding="utf-8"))
    assert [(e.row, e.column) for e in errors] == [(ROWS + 1, 1)]
    assert elapsed < 10
