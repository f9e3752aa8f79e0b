"""
Monte Carlo estimation of the site percolation threshold.

Each trial opens uniformly random sites of a fresh grid until it percolates and
records the fraction of sites that were open at that moment. The estimator
summarizes the trials with a mean, a sample standard deviation and a
normal-approximation confidence interval.
"""

from typing import Callable, Dict, Optional, Union

import numpy as np
from scipy import stats

from .grid import PercolationGrid, check_positive_int
from .union_find import InvalidArgument

# Two-sided 95% normal quantile
CONFIDENCE_95 = 1.96

# Returns a uniform integer in [lo, hi)
RandomSource = Callable[[int, int], int]


def z_score(confidence: float = 0.95) -> float:
    """
    Two-sided normal quantile for a confidence level.

    Args:
        confidence: Confidence level in (0, 1)

    Returns:
        1.96 for the 95% level, otherwise norm.ppf((1 + confidence) / 2)
    """
    if not 0.0 < confidence < 1.0:
        raise InvalidArgument(f"Confidence level must be in (0, 1), got {confidence}")
    if confidence == 0.95:
        return CONFIDENCE_95
    return float(stats.norm.ppf(0.5 + confidence / 2.0))


def make_random_source(random_source: Union[RandomSource, np.random.Generator, None] = None,
                       seed: Optional[int] = None) -> RandomSource:
    """
    Resolve the random integer source used to pick sites.

    Args:
        random_source: Callable (lo, hi) -> int in [lo, hi), a numpy Generator,
            or None for a fresh numpy Generator
        seed: Seed for the fresh Generator (ignored when random_source is given)

    Returns:
        Callable (lo, hi) -> int
    """
    if random_source is None:
        random_source = np.random.default_rng(seed)
    if isinstance(random_source, np.random.Generator):
        return random_source.integers
    if not callable(random_source):
        raise InvalidArgument(f"random_source must be callable, got {type(random_source).__name__}")
    return random_source


def run_trial(n: int, random_source: RandomSource) -> float:
    """
    Open random sites of a fresh n-by-n grid until it percolates.

    Draws that land on an already-open site are simply repeated; a full grid
    always percolates so the loop terminates.

    Returns:
        Fraction of sites open when the grid first percolated
    """
    grid = PercolationGrid(n)
    while not grid.percolates():
        grid.open(random_source(1, n + 1), random_source(1, n + 1))
    return grid.number_of_open_sites() / grid.size


def summarize_trials(samples, confidence: float = 0.95) -> Dict[str, float]:
    """
    Mean, sample standard deviation and confidence bounds of trial samples.

    With a single sample the standard deviation is undefined and reported as
    NaN, which carries into both confidence bounds.

    Args:
        samples: Sequence of open-site fractions, one per trial
        confidence: Confidence level of the interval

    Returns:
        Dict with 'mean', 'stddev', 'confidence_lo', 'confidence_hi'
    """
    samples = np.asarray(samples, dtype=np.float64)
    if samples.size == 0:
        raise InvalidArgument("At least one trial sample is required")

    mean = float(np.mean(samples))
    if samples.size > 1:
        stddev = float(np.std(samples, ddof=1))
    else:
        stddev = np.nan

    half_width = z_score(confidence) * stddev / np.sqrt(samples.size)
    return {
        'mean': mean,
        'stddev': stddev,
        'confidence_lo': mean - half_width,
        'confidence_hi': mean + half_width,
    }


class ThresholdEstimator:
    """
    Runs independent percolation trials and summarizes the thresholds.

    All statistics are computed once, in the constructor.

    Example:
        est = ThresholdEstimator(200, 100, seed=42)
        print(est.mean(), est.confidence_lo(), est.confidence_hi())
    """

    def __init__(self, n: int, trials: int,
                 random_source: Union[RandomSource, np.random.Generator, None] = None,
                 seed: Optional[int] = None, confidence: float = 0.95,
                 verbose: bool = False):
        """
        Run the trials.

        Args:
            n: Grid dimension
            trials: Number of independent trials
            random_source: Callable (lo, hi) -> int in [lo, hi) or numpy Generator
                (default: numpy Generator seeded with seed)
            seed: Seed for the default random source
            confidence: Confidence level of the interval (default: 0.95)
            verbose: Print one line per trial
        """
        self.n = check_positive_int(n, "Grid size n")
        self.trials = check_positive_int(trials, "Number of trials")
        self.confidence = confidence
        z_score(confidence)  # reject a bad level before running any trials
        draw = make_random_source(random_source, seed)

        samples = np.empty(self.trials, dtype=np.float64)
        for i in range(self.trials):
            samples[i] = run_trial(self.n, draw)
            if verbose:
                print(f"  Trial {i + 1}/{self.trials}: threshold = {samples[i]:.6f}")
        samples.flags.writeable = False
        self._samples = samples

        summary = summarize_trials(samples, confidence)
        self._mean = summary['mean']
        self._stddev = summary['stddev']
        self._confidence_lo = summary['confidence_lo']
        self._confidence_hi = summary['confidence_hi']

    def __repr__(self) -> str:
        return f"ThresholdEstimator(n={self.n}, trials={self.trials}, mean={self._mean:.6f})"

    @property
    def results(self) -> np.ndarray:
        """Per-trial open-site fractions (read-only)."""
        return self._samples

    def mean(self) -> float:
        return self._mean

    def stddev(self) -> float:
        """Sample standard deviation; NaN when trials == 1."""
        return self._stddev

    def confidence_lo(self) -> float:
        return self._confidence_lo

    def confidence_hi(self) -> float:
        return self._confidence_hi

    def summary(self) -> Dict[str, float]:
        return {
            'n': self.n,
            'trials': self.trials,
            'mean': self._mean,
            'stddev': self._stddev,
            'confidence_lo': self._confidence_lo,
            'confidence_hi': self._confidence_hi,
        }

    confidenceLo = confidence_lo
    confidenceHi = confidence_hi
