"""Feature-table assembly.

Converts decoded ``LocatableFeature`` records into a DataFrame and offers a
per-contig summary of what the table covers.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd

from ..core.feature import LocatableFeature
from ..utils import normalize_chrom

__all__ = ["LOCUS_COLUMNS", "features_to_frame", "contig_summary"]

LOCUS_COLUMNS = ["Contig", "Start", "End", "Length"]


def features_to_frame(features: Iterable[LocatableFeature], header: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """Return DataFrame with columns: Contig, Start, End, Length, then every header column.

    Header columns keep their raw string values. ``header`` is only needed to
    produce the right columns for an empty feature list.
    """
    rows: List[dict] = []
    for feat in features:
        if header is None:
            header = feat.header
        row = {"Contig": feat.contig, "Start": feat.start, "End": feat.end, "Length": feat.length}
        for name, value in feat.to_dict().items():
            # locus columns win on a name clash
            row.setdefault(name, value)
        rows.append(row)
    columns = list(LOCUS_COLUMNS)
    for name in header or []:
        if name not in columns:
            columns.append(name)
    df = pd.DataFrame(rows, columns=columns)
    for col in ["Start", "End", "Length"]:
        df[col] = pd.to_numeric(df[col], errors="coerce").astype("Int64")
    return df


def _contig_sort_key(contig: str):
    c = normalize_chrom(contig)
    return (0, int(c), "") if c.isdigit() else (1, 0, c)


def contig_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Per-contig counts and span statistics.

    Columns returned:
        Contig, Features, MinStart, MaxEnd, TotalLength, MeanLength, MedianLength

    Contigs are ordered naturally (chr1, chr2, ..., chr10, chrX).
    """
    missing = [c for c in LOCUS_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"DataFrame must contain columns: {', '.join(missing)}")
    out_cols = ["Contig", "Features", "MinStart", "MaxEnd", "TotalLength", "MeanLength", "MedianLength"]
    if df.empty:
        return pd.DataFrame(columns=out_cols)
    rows = []
    for contig, sub in df.groupby("Contig", sort=False):
        lengths = sub["Length"].to_numpy(dtype=float, na_value=np.nan)
        rows.append({
            "Contig": contig,
            "Features": len(sub),
            "MinStart": int(sub["Start"].min()),
            "MaxEnd": int(sub["End"].max()),
            "TotalLength": int(np.nansum(lengths)),
            "MeanLength": float(np.nanmean(lengths)),
            "MedianLength": float(np.nanmedian(lengths)),
        })
    rows.sort(key=lambda r: _contig_sort_key(str(r["Contig"])))
    return pd.DataFrame(rows, columns=out_cols)
