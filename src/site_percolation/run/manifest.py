"""
Run configuration for threshold sweeps.

The RunConfig loads a YAML run definition listing the grid sizes to sweep,
the number of trials per size, and where to write the results table.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional


class RunConfig:
    """
    Loads and validates a sweep configuration YAML.

    Example:
        config = RunConfig.from_yaml('config/square_sweep.yaml')
        print(config.run_name)
        print(config.grid_sizes)
    """

    def __init__(self, data: Dict[str, Any]):
        if not isinstance(data, dict):
            raise ValueError("Run config must be a mapping")
        self._data = data
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'RunConfig':
        """Load run config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Run config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        return cls(data)

    def _validate(self):
        """Validate required config sections and value types."""
        required_sections = ['run_name', 'grid_sizes', 'trials', 'output']
        for section in required_sections:
            if section not in self._data:
                raise ValueError(f"Missing required config section: '{section}'")

        grid_sizes = self._data['grid_sizes']
        if isinstance(grid_sizes, int):
            grid_sizes = [grid_sizes]
        if not grid_sizes or not all(_is_positive_int(n) for n in grid_sizes):
            raise ValueError(f"'grid_sizes' must be a list of positive integers, got {grid_sizes!r}")

        if not _is_positive_int(self._data['trials']):
            raise ValueError(f"'trials' must be a positive integer, got {self._data['trials']!r}")

        seed = self._data.get('seed')
        if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
            raise ValueError(f"'seed' must be a non-negative integer, got {seed!r}")

        confidence = self._data.get('confidence', 0.95)
        if not isinstance(confidence, (int, float)) or not 0.0 < confidence < 1.0:
            raise ValueError(f"'confidence' must be in (0, 1), got {confidence!r}")

        if not isinstance(self._data['output'], dict) or 'base_dir' not in self._data['output']:
            raise ValueError("Config section 'output' must define 'base_dir'")

    # --- Properties ---

    @property
    def run_name(self) -> str:
        return self._data['run_name']

    @property
    def description(self) -> str:
        return self._data.get('description', '')

    @property
    def grid_sizes(self) -> List[int]:
        grid_sizes = self._data['grid_sizes']
        if isinstance(grid_sizes, int):
            return [grid_sizes]
        return list(grid_sizes)

    @property
    def trials(self) -> int:
        return self._data['trials']

    @property
    def seed(self) -> Optional[int]:
        return self._data.get('seed')

    @property
    def confidence(self) -> float:
        return float(self._data.get('confidence', 0.95))

    # --- Output paths ---

    @property
    def base_dir(self) -> Path:
        return Path(self._data['output']['base_dir'])

    @property
    def results_csv(self) -> Path:
        return self.base_dir / self._data['output'].get('results_csv', 'thresholds.csv')

    def print_summary(self):
        """Print what this run will compute."""
        print(f"=== RUN: {self.run_name} ===")
        if self.description:
            print(self.description)
        print(f"Grid sizes: {', '.join(str(n) for n in self.grid_sizes)}")
        print(f"Trials per size: {self.trials}")
        print(f"Seed: {self.seed if self.seed is not None else 'random'}")
        print(f"Confidence level: {self.confidence:.0%}")
        print(f"Results: {self.results_csv}")


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
