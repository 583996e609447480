# -*- coding: utf-8 -*-
"""
Load reference I–V datasets (measured or textbook) for validation.

CSV schema:
  IV: V [V], I [A or the curve's display unit], optional sample_id
"""
from pathlib import Path
import pandas as pd

def load_iv(csv_path: Path) -> pd.DataFrame:
    df = pd.read_csv(csv_path)
    if not {"V", "I"}.issubset(df.columns):
        raise ValueError(f"IV CSV must have V,I columns (got {list(df.columns)})")
    return df.sort_values("V").reset_index(drop=True)
