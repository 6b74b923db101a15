"""Base plotting utilities shared across feature plot modules.

Centralises style configuration and the histogram helper so the plot
functions stay short. Each helper returns a matplotlib Figure when no
``output_path`` is given; otherwise the figure is saved, closed and
``None`` is returned.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

import matplotlib.pyplot as plt
import seaborn as sns
import pandas as pd
import numpy as np

__all__ = [
	"set_plot_style",
	"save_figure",
	"smart_cutoff_values",
	"hist_plot",
]


def set_plot_style() -> None:
	"""Apply a unified visual style."""
	sns.set_theme(style="whitegrid")
	plt.rcParams.update({
		"axes.titlesize": 13,
		"axes.labelsize": 11,
		"font.size": 10,
		"figure.dpi": 100,
	})


def save_figure(fig: plt.Figure, output_path: Optional[str]) -> Optional[plt.Figure]:
	"""Save figure if ``output_path`` provided else return it.

	Parameters
	----------
	fig : matplotlib.figure.Figure
		Figure to save or return.
	output_path : str | None
		Path to save. If None the figure is returned and *not* closed.
	"""
	if output_path:
		fig.savefig(output_path, bbox_inches="tight")
		plt.close(fig)
		return None
	return fig


def smart_cutoff_values(arr: np.ndarray, pct: float = 99.5, max_iter: int = 5) -> Tuple[np.ndarray, int]:
	"""Iteratively drop the upper tail while it is longer than the body.

	A pass trims values above the ``pct`` percentile when
	``max - p[pct] > p[pct] - median``. Returns (kept values, passes applied).
	NaNs are dropped first.
	"""
	current = arr[~np.isnan(arr)]
	iters = 0
	while iters < max_iter and current.size:
		cur_max = float(current.max())
		p_hi = float(np.percentile(current, pct))
		p50 = float(np.percentile(current, 50))
		if (cur_max - p_hi) > (p_hi - p50):
			current = current[current <= p_hi]
			iters += 1
		else:
			break
	return current, iters


def hist_plot(
	values: Union[pd.Series, np.ndarray, list],
	*,
	output_path: Optional[str] = None,
	title: str = "",
	xlabel: str = "",
	bins: int = 50,
	color: str = "steelblue",
	kde: bool = False,
	logx: bool = False,
	figsize: Tuple[int, int] = (8, 5),
	smart_cutoff: float = 99.5,
	enable_smart_cutoff: bool = True,
) -> Optional[plt.Figure]:
	"""Histogram + (optional) KDE.

	When the smart cutoff trims anything, the title notes the original range.
	"""
	set_plot_style()
	arr = np.asarray(values, dtype=float)
	mask = ~np.isnan(arr)
	filtered = arr[mask]
	cut_phrase = ""
	if mask.any():
		orig_min = float(filtered.min())
		orig_max = float(filtered.max())
		if enable_smart_cutoff and 0 < smart_cutoff < 100:
			filtered, iters = smart_cutoff_values(filtered, smart_cutoff)
			if iters:
				cut_phrase = f"(smart cutoff at {smart_cutoff:.2f}% iter={iters} | original range:{orig_min:g}-{orig_max:g})"
	fig, ax = plt.subplots(figsize=figsize)
	if filtered.size:
		sns.histplot(filtered, bins=bins, kde=kde and filtered.size > 1, color=color, ax=ax, log_scale=logx)
	else:
		ax.text(0.5, 0.5, "No data", ha="center", va="center", transform=ax.transAxes)
	ax.set_title(f"{title}\n{cut_phrase}" if cut_phrase else title)
	ax.set_xlabel(xlabel)
	ax.set_ylabel("Count")
	fig.tight_layout()
	return save_figure(fig, output_path)
