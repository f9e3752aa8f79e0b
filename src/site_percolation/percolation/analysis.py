"""
Tabulation of threshold estimates.

Turns ThresholdEstimator results into pandas tables, saves them as CSV and
combines result files from separate runs.
"""

import glob
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

import pandas as pd

from .estimator import ThresholdEstimator

RESULT_COLUMNS = ['n', 'trials', 'mean', 'stddev', 'confidence_lo', 'confidence_hi']


def estimator_to_record(estimator: ThresholdEstimator,
                        elapsed_seconds: Optional[float] = None) -> Dict[str, Any]:
    """
    Flatten an estimator's summary into one table row.

    Args:
        estimator: Finished estimator
        elapsed_seconds: Wall-clock time the trials took (optional)

    Returns:
        Dict keyed by RESULT_COLUMNS (plus 'confidence' and 'elapsed_seconds')
    """
    record = estimator.summary()
    record['confidence'] = estimator.confidence
    if elapsed_seconds is not None:
        record['elapsed_seconds'] = elapsed_seconds
    return record


def results_to_frame(records: Iterable[Dict[str, Any]]) -> pd.DataFrame:
    """Build a results DataFrame sorted by grid size."""
    df = pd.DataFrame(list(records))
    if df.empty:
        return pd.DataFrame(columns=RESULT_COLUMNS)
    return df.sort_values('n').reset_index(drop=True)


def save_results(df: pd.DataFrame, output_file: Union[str, Path]) -> Path:
    """Write a results table to CSV, creating parent directories."""
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_file, index=False)
    return output_file


def combine_result_files(
    results_dir: Union[str, Path],
    output_file: Optional[Union[str, Path]] = None,
    pattern: str = "*.csv",
) -> pd.DataFrame:
    """
    Combine result CSV files from separate runs into one table.

    Files that cannot be read, are empty, or lack the result columns are skipped.

    Args:
        results_dir: Directory containing result CSV files
        output_file: Path for the combined CSV (not written if None)
        pattern: Glob pattern for result files

    Returns:
        Combined DataFrame sorted by grid size
    """
    results_dir = Path(results_dir)
    result_files = sorted(glob.glob(str(results_dir / pattern)))

    if not result_files:
        print(f"No result files found in {results_dir}")
        return pd.DataFrame(columns=RESULT_COLUMNS)

    print(f"Found {len(result_files)} result files")

    dfs = []
    failed_files = []
    for result_file in result_files:
        try:
            df = pd.read_csv(result_file)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError):
            failed_files.append(result_file)
            continue

        missing = [col for col in RESULT_COLUMNS if col not in df.columns]
        if missing or len(df) == 0:
            failed_files.append(result_file)
            continue
        dfs.append(df)

    if failed_files:
        print(f"Warning: Skipped {len(failed_files)} unreadable or incomplete files")

    if not dfs:
        print("No valid data to combine")
        return pd.DataFrame(columns=RESULT_COLUMNS)

    combined_df = pd.concat(dfs, ignore_index=True)
    combined_df = combined_df.sort_values(['n', 'trials'], kind='stable').reset_index(drop=True)

    if output_file is not None:
        save_results(combined_df, output_file)
        print(f"Saved {len(combined_df)} rows to: {output_file}")

    return combined_df
