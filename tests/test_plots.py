import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pandas as pd  # noqa: E402
import pytest  # noqa: E402

from xsv_locatable.plot import plot_feature_length_distribution, plot_features_per_contig  # noqa: E402
from xsv_locatable.plot.base import smart_cutoff_values  # noqa: E402

SUMMARY = pd.DataFrame({"Contig": ["chr1", "chr2", "chrX"], "Features": [10, 4, 1]})
FEATURES = pd.DataFrame({"Length": [1, 10, 100, 250, 1000]})


def test_features_per_contig_returns_figure():
    fig = plot_features_per_contig(SUMMARY)
    assert isinstance(fig, plt.Figure)
    plt.close(fig)


def test_features_per_contig_saves(tmp_path):
    out = tmp_path / "contigs.png"
    assert plot_features_per_contig(SUMMARY, output_path=str(out)) is None
    assert out.exists()


def test_length_distribution_saves(tmp_path):
    out = tmp_path / "lengths.png"
    assert plot_feature_length_distribution(FEATURES, output_path=str(out), logx=True) is None
    assert out.exists()


def test_empty_inputs_still_plot():
    fig = plot_features_per_contig(SUMMARY.iloc[0:0])
    assert isinstance(fig, plt.Figure)
    plt.close(fig)
    fig = plot_feature_length_distribution(pd.DataFrame({"Length": []}))
    assert isinstance(fig, plt.Figure)
    plt.close(fig)


def test_missing_columns():
    with pytest.raises(ValueError):
        plot_features_per_contig(pd.DataFrame({"Contig": ["chr1"]}))
    with pytest.raises(ValueError):
        plot_feature_length_distribution(pd.DataFrame({"Start": [1]}))


def test_smart_cutoff_trims_long_tail():
    values = np.array([10.0] * 200 + [11.0] * 200 + [1_000_000.0])
    kept, iters = smart_cutoff_values(values, 99.5)
    assert iters >= 1
    assert kept.max() < 1_000_000.0
    kept, iters = smart_cutoff_values(np.array([1.0, 2.0, 3.0, np.nan]), 99.5)
    assert iters == 0
    assert kept.size == 3
