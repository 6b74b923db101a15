"""Metric computation subpackage."""

from .feature_metrics import features_to_frame, contig_summary  # noqa: F401

__all__ = ["features_to_frame", "contig_summary"]
