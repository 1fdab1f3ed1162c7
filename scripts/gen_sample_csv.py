#!/usr/bin/env python3
"""Sample dataset generation script for the CSV -> nested JSON converter.

Generates a synthetic CSV whose headers use the dotted-path convention:
- ``name``: record key (unique per row)
- ``address.city`` / ``address.zip``: nested object
- ``skills.0`` .. ``skills.N``: array members (some left blank -> null)
- ``scores.N``: numeric array, ``active``: boolean, ``rating``: float

Cities containing commas and quotes are included so that the quoting rules of
the reader get exercised on manual / performance runs.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

CITIES = ["Tokyo", "Osaka", "Sapporo, Hokkaido", 'Naha "Okinawa"', "Fukuoka"]
SKILLS = ["reading", "cooking", "chess", "go", "tennis", "piano", "python"]


def generate_synthetic_rows(rows: int, skills: int = 3, seed: int = 42) -> pd.DataFrame:
    """Generate a DataFrame whose columns are dotted headers.
    
    Args:
        rows: Number of data rows to generate
        skills: Number of ``skills.N`` columns
        seed: Random seed for reproducible data
        
    Returns:
        DataFrame with one column per dotted header
    """
    np.random.seed(seed)
    
    data: dict[str, list[Any]] = {}
    data["name"] = [f"user_{j + 1:06d}" for j in range(rows)]
    data["address.city"] = np.random.choice(CITIES, rows).tolist()
    data["address.zip"] = [f"{z:03d}-{z * 7 % 10000:04d}" for z in np.random.randint(100, 999, rows)]
    
    for i in range(skills):
        picked = np.random.choice(SKILLS, rows).tolist()
        # 約2割は空欄 (null になる)
        blanks = np.random.random(rows) < 0.2
        data[f"skills.{i}"] = ["" if b else s for s, b in zip(picked, blanks)]
    
    for i in range(2):
        data[f"scores.{i}"] = np.random.randint(0, 100, rows).tolist()
    
    data["active"] = np.random.choice(["true", "false"], rows).tolist()
    data["rating"] = np.round(np.random.uniform(0, 5, rows), 2).tolist()
    return pd.DataFrame(data)


def create_csv_file(output_path: Path, rows: int, skills: int = 3, seed: int = 42) -> None:
    """Write the synthetic dataset as UTF-8 CSV (header line + data lines)."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df = generate_synthetic_rows(rows, skills, seed)
    df.to_csv(output_path, index=False, encoding="utf-8", lineterminator="\n")
    print(f"Created CSV file: {output_path}")
    print(f"  Rows: {rows} (+ 1 header row)")
    print(f"  Columns: {len(df.columns)}")


def main(argv: list[str] | None = None) -> int:
    """Main CLI interface for dataset generation."""
    parser = argparse.ArgumentParser(
        description="Generate a synthetic dotted-header CSV dataset",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate default 10k rows
  %(prog)s export.csv
  
  # Generate custom size dataset with 5 skills columns
  %(prog)s large.csv --rows 200000 --skills 5 --seed 123
        """
    )
    parser.add_argument("output", type=Path, help="Output CSV file path")
    parser.add_argument("--rows", type=int, default=10_000, help="Number of data rows (default: 10,000)")
    parser.add_argument("--skills", type=int, default=3, help="Number of skills.N columns (default: 3)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    
    args = parser.parse_args(argv)
    
    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1
    if args.skills < 0:
        print("Error: --skills must not be negative", file=sys.stderr)
        return 1
    
    try:
        create_csv_file(args.output, args.rows, args.skills, args.seed)
    except OSError as e:
        print(f"\nError generating dataset: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
