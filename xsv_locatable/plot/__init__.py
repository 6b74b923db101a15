"""High-level plotting API for the xsv_locatable package.

Import convenience: ``from xsv_locatable.plot import plot_features_per_contig``.
"""

from .feature_plots import *  # noqa: F401,F403
from .feature_plots import __all__  # noqa: F401
