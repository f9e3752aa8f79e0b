"""Site percolation grid and Monte Carlo threshold estimation."""

from .union_find import InvalidArgument, WeightedQuickUnionUF
from .grid import PercolationGrid
from .estimator import ThresholdEstimator, run_trial, summarize_trials, z_score
from .analysis import combine_result_files, results_to_frame

__all__ = [
    'InvalidArgument',
    'WeightedQuickUnionUF',
    'PercolationGrid',
    'ThresholdEstimator',
    'run_trial',
    'summarize_trials',
    'z_score',
    'combine_result_files',
    'results_to_frame',
]
