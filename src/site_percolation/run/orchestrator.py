"""
Run orchestrator - runs a threshold sweep from a RunConfig.

For every configured grid size this runs a ThresholdEstimator and collects
the summaries into one results table.

Usage:
    orchestrator = RunOrchestrator(config)
    df = orchestrator.run(save=True)
"""

from typing import List, Optional

import numpy as np
import pandas as pd

from .manifest import RunConfig
from ..percolation.analysis import estimator_to_record, results_to_frame, save_results
from ..percolation.estimator import ThresholdEstimator
from ..utils.timing import format_duration, stopwatch


class RunOrchestrator:
    """
    Runs one ThresholdEstimator per grid size in a RunConfig.

    Each grid size gets its own numpy Generator spawned from the config seed,
    so a seeded sweep is reproducible and sizes do not share a random stream.

    Example:
        config = RunConfig.from_yaml('config/square_sweep.yaml')
        orch = RunOrchestrator(config)
        orch.run()
    """

    def __init__(self, config: RunConfig, verbose: bool = False):
        """
        Initialize orchestrator.

        Args:
            config: Run configuration
            verbose: Print one line per trial
        """
        self.config = config
        self.verbose = verbose

    def generators(self) -> List[np.random.Generator]:
        """One independent Generator per grid size, derived from the config seed."""
        children = np.random.SeedSequence(self.config.seed).spawn(len(self.config.grid_sizes))
        return [np.random.default_rng(child) for child in children]

    def run(self, save: bool = False, output_file: Optional[str] = None) -> pd.DataFrame:
        """
        Run the sweep.

        Args:
            save: Write the results table to CSV
            output_file: CSV path (default: config.results_csv)

        Returns:
            DataFrame with one row per grid size
        """
        config = self.config
        print(f"Running {config.run_name}: {len(config.grid_sizes)} grid sizes x {config.trials} trials")

        records = []
        for n, rng in zip(config.grid_sizes, self.generators()):
            with stopwatch() as timing:
                est = ThresholdEstimator(n, config.trials, random_source=rng,
                                         confidence=config.confidence, verbose=self.verbose)
            records.append(estimator_to_record(est, elapsed_seconds=timing['elapsed']))
            print(f"  n={n}: mean={est.mean():.6f} stddev={est.stddev():.6f} "
                  f"[{est.confidence_lo():.6f}, {est.confidence_hi():.6f}] "
                  f"({format_duration(timing['elapsed'])})")

        df = results_to_frame(records)

        if save:
            path = save_results(df, output_file or config.results_csv)
            print(f"Saved to: {path}")

        return df
