"""Tests for the command-line interface."""

import pandas as pd
import yaml
from click.testing import CliRunner

from site_percolation.cli.main import cli, stats_main


class TestStatsCommand:
    """Tests for percolation-stats N TRIALS."""

    def test_prints_three_lines(self):
        result = CliRunner().invoke(stats_main, ['10', '5', '--seed', '1'])

        assert result.exit_code == 0, result.output
        lines = result.output.strip().splitlines()
        assert len(lines) == 3
        assert lines[0].startswith("mean                    = ")
        assert lines[1].startswith("stddev                  = ")
        assert lines[2].startswith("95% confidence interval = [")
        assert lines[2].endswith("]")

    def test_seeded_output_is_reproducible(self):
        runner = CliRunner()
        first = runner.invoke(stats_main, ['8', '4', '--seed', '3'])
        second = runner.invoke(stats_main, ['8', '4', '--seed', '3'])

        assert first.output == second.output

    def test_single_trial_reports_nan(self):
        result = CliRunner().invoke(stats_main, ['2', '1', '--seed', '0'])

        assert result.exit_code == 0, result.output
        assert "stddev                  = nan" in result.output
        assert "[nan, nan]" in result.output

    def test_missing_arguments(self):
        result = CliRunner().invoke(stats_main, ['10'])

        assert result.exit_code == 2

    def test_non_positive_arguments(self):
        runner = CliRunner()

        assert runner.invoke(stats_main, ['0', '5']).exit_code == 2
        assert runner.invoke(stats_main, ['5', '0']).exit_code == 2
        assert runner.invoke(stats_main, ['five', '5']).exit_code == 2

    def test_group_stats_command(self):
        result = CliRunner().invoke(cli, ['stats', '5', '3', '--seed', '2', '--confidence', '0.99'])

        assert result.exit_code == 0, result.output
        assert "99% confidence interval" in result.output


class TestDemoCommand:
    """Tests for the 5x5 demonstration."""

    def test_demo_does_not_percolate(self):
        result = CliRunner().invoke(cli, ['demo'])

        assert result.exit_code == 0, result.output
        assert "Open sites: 9" in result.output
        assert "Percolates: False" in result.output
        assert result.output.splitlines()[4] == ". . . . ."


class TestSweepCommands:
    """Tests for sweep subcommands."""

    def _write_config(self, tmp_path):
        config_path = tmp_path / "run.yaml"
        config_path.write_text(yaml.safe_dump({
            "run_name": "cli_sweep",
            "grid_sizes": [3, 5],
            "trials": 3,
            "seed": 8,
            "output": {"base_dir": str(tmp_path / "out")},
        }))
        return config_path

    def test_sweep_run(self, tmp_path):
        config_path = self._write_config(tmp_path)

        result = CliRunner().invoke(cli, ['sweep', 'run', '--config', str(config_path)])

        assert result.exit_code == 0, result.output
        df = pd.read_csv(tmp_path / "out" / "thresholds.csv")
        assert list(df['n']) == [3, 5]

    def test_sweep_summary(self, tmp_path):
        config_path = self._write_config(tmp_path)

        result = CliRunner().invoke(cli, ['sweep', 'summary', '--config', str(config_path)])

        assert result.exit_code == 0, result.output
        assert "cli_sweep" in result.output

    def test_sweep_run_invalid_config(self, tmp_path):
        config_path = tmp_path / "bad.yaml"
        config_path.write_text(yaml.safe_dump({"run_name": "bad"}))

        result = CliRunner().invoke(cli, ['sweep', 'run', '--config', str(config_path)])

        assert result.exit_code == 2
        assert "Invalid run config" in result.output

    def test_sweep_combine(self, tmp_path):
        config_path = self._write_config(tmp_path)
        runner = CliRunner()
        runner.invoke(cli, ['sweep', 'run', '--config', str(config_path)])

        result = runner.invoke(cli, ['sweep', 'combine', '--results-dir', str(tmp_path / "out"),
                                     '--output', str(tmp_path / "combined.csv")])

        assert result.exit_code == 0, result.output
        assert "Combined 2 rows" in result.output
        assert (tmp_path / "combined.csv").exists()
