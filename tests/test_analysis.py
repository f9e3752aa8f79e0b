"""Tests for result tabulation."""

import pandas as pd

from site_percolation.percolation import ThresholdEstimator
from site_percolation.percolation.analysis import (
    RESULT_COLUMNS, combine_result_files, estimator_to_record, results_to_frame, save_results
)


def _row(n, trials=5, mean=0.6):
    return {'n': n, 'trials': trials, 'mean': mean, 'stddev': 0.05,
            'confidence_lo': mean - 0.01, 'confidence_hi': mean + 0.01}


class TestRecords:
    """Tests for estimator records and frames."""

    def test_estimator_to_record(self):
        est = ThresholdEstimator(4, 3, seed=0)

        record = estimator_to_record(est, elapsed_seconds=1.5)

        for col in RESULT_COLUMNS:
            assert col in record
        assert record['confidence'] == 0.95
        assert record['elapsed_seconds'] == 1.5
        assert record['mean'] == est.mean()

    def test_results_to_frame_sorted(self):
        df = results_to_frame([_row(16), _row(4), _row(8)])

        assert list(df['n']) == [4, 8, 16]
        assert list(df.index) == [0, 1, 2]

    def test_results_to_frame_empty(self):
        df = results_to_frame([])

        assert df.empty
        assert list(df.columns) == RESULT_COLUMNS

    def test_save_results_creates_dirs(self, tmp_path):
        output = tmp_path / "nested" / "dir" / "results.csv"

        save_results(results_to_frame([_row(4)]), output)

        assert output.exists()
        assert len(pd.read_csv(output)) == 1


class TestCombineResultFiles:
    """Tests for combining CSV files from separate runs."""

    def test_combines_and_sorts(self, tmp_path):
        pd.DataFrame([_row(32), _row(8)]).to_csv(tmp_path / "a.csv", index=False)
        pd.DataFrame([_row(16)]).to_csv(tmp_path / "b.csv", index=False)
        output = tmp_path / "combined" / "all.csv"

        df = combine_result_files(tmp_path, output)

        assert list(df['n']) == [8, 16, 32]
        assert output.exists()

    def test_skips_incomplete_files(self, tmp_path, capsys):
        pd.DataFrame([_row(8)]).to_csv(tmp_path / "good.csv", index=False)
        pd.DataFrame([{'n': 4, 'mean': 0.5}]).to_csv(tmp_path / "partial.csv", index=False)
        (tmp_path / "empty.csv").write_text("")

        df = combine_result_files(tmp_path)
        captured = capsys.readouterr().out

        assert list(df['n']) == [8]
        assert "Skipped 2" in captured

    def test_no_files(self, tmp_path):
        df = combine_result_files(tmp_path)

        assert df.empty
