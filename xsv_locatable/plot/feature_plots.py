"""Feature-table QC plots.

Implements:
 - Features per contig (bar)
 - Feature length distribution (histogram, optional log x)

Both accept the output of ``metrics.features_to_frame`` /
``metrics.contig_summary`` and follow the package convention of returning
a Figure when ``output_path`` is None.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import seaborn as sns
import matplotlib.pyplot as plt

from .base import set_plot_style, save_figure, hist_plot

__all__ = [
	"plot_features_per_contig",
	"plot_feature_length_distribution",
]


def plot_features_per_contig(
	summary: pd.DataFrame,
	*,
	output_path: Optional[str] = None,
	title: str = "Features per contig",
	color: str = "#4477AA",
	rotation: int = 45,
) -> Optional[plt.Figure]:
	"""Bar plot of the ``Features`` column of a contig summary, in summary order."""
	if not {"Contig", "Features"}.issubset(summary.columns):
		raise ValueError("DataFrame must contain Contig and Features columns")
	set_plot_style()
	df = summary[["Contig", "Features"]].copy()
	df["Contig"] = df["Contig"].astype(str)
	width = max(6, min(18, 0.4 * len(df) + 2))
	fig, ax = plt.subplots(figsize=(width, 5))
	if df.empty:
		ax.text(0.5, 0.5, "No features", ha="center", va="center", transform=ax.transAxes)
	else:
		sns.barplot(data=df, x="Contig", y="Features", color=color, order=list(df["Contig"]), ax=ax)
		for label in ax.get_xticklabels():
			label.set_rotation(rotation)
			label.set_ha("right")
	ax.set_title(title)
	ax.set_xlabel("Contig")
	ax.set_ylabel("Features")
	fig.tight_layout()
	return save_figure(fig, output_path)


def plot_feature_length_distribution(
	features: pd.DataFrame,
	*,
	output_path: Optional[str] = None,
	title: str = "Feature length distribution",
	bins: int = 50,
	logx: bool = False,
	enable_smart_cutoff: bool = True,
) -> Optional[plt.Figure]:
	"""Histogram of ``Length`` (end - start + 1) across all features."""
	if "Length" not in features.columns:
		raise ValueError("DataFrame must contain Length column")
	lengths = pd.to_numeric(features["Length"], errors="coerce").astype(float)
	if logx:
		# log axis cannot show zero / negative spans
		lengths = lengths[lengths > 0]
	return hist_plot(
		lengths.to_numpy(),
		output_path=output_path,
		title=title,
		xlabel="Length (bp)",
		bins=bins,
		color="#1565C0",
		logx=logx,
		enable_smart_cutoff=enable_smart_cutoff,
	)
