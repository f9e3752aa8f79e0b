"""
Command-line interface for site_percolation.

Threshold estimate for one grid size:
    percolation-stats 200 100
    site-percolation stats 200 100 --seed 42

Sweeps over several grid sizes (YAML run config):
    site-percolation sweep summary --config run.yaml
    site-percolation sweep run --config run.yaml
    site-percolation sweep combine --results-dir results/ --output all.csv

Demonstration:
    site-percolation demo
"""

import click


def _echo_stats(est):
    click.echo(f"mean                    = {est.mean():f}")
    click.echo(f"stddev                  = {est.stddev():f}")
    click.echo(f"{est.confidence:.0%} confidence interval = "
               f"[{est.confidence_lo():f}, {est.confidence_hi():f}]")


def _run_stats(n, trials, seed, confidence, verbose):
    from ..percolation import InvalidArgument, ThresholdEstimator

    try:
        est = ThresholdEstimator(n, trials, seed=seed, confidence=confidence, verbose=verbose)
    except InvalidArgument as e:
        raise click.UsageError(str(e))
    _echo_stats(est)


_stats_arguments = [
    click.argument('n', type=click.IntRange(min=1)),
    click.argument('trials', type=click.IntRange(min=1)),
    click.option('--seed', type=int, default=None, help='Seed for reproducible trials'),
    click.option('--confidence', default=0.95, type=click.FloatRange(0, 1, min_open=True, max_open=True),
                 help='Confidence level of the interval'),
    click.option('--verbose', '-v', is_flag=True, help='Print every trial'),
]


def _with_stats_arguments(func):
    for decorator in reversed(_stats_arguments):
        func = decorator(func)
    return func


@click.command()
@_with_stats_arguments
def stats_main(n, trials, seed, confidence, verbose):
    """Estimate the percolation threshold of an N-by-N grid over TRIALS trials."""
    _run_stats(n, trials, seed, confidence, verbose)


@click.group()
@click.version_option()
def cli():
    """Site Percolation - percolation grids and threshold estimation."""
    pass


@cli.command('stats')
@_with_stats_arguments
def stats(n, trials, seed, confidence, verbose):
    """Estimate the percolation threshold of an N-by-N grid over TRIALS trials."""
    _run_stats(n, trials, seed, confidence, verbose)


# Open sites of the 5x5 demonstration grid, in order
DEMO_SITES = [(1, 1), (1, 3), (2, 2), (2, 3), (3, 3), (4, 3), (4, 1), (4, 2), (3, 2)]


@cli.command('demo')
def demo():
    """Open a fixed sequence of sites on a 5x5 grid and report percolation."""
    from ..percolation import PercolationGrid

    grid = PercolationGrid(5)
    for row, col in DEMO_SITES:
        grid.open(row, col)

    for row in range(1, grid.n + 1):
        cells = []
        for col in range(1, grid.n + 1):
            if grid.is_full(row, col):
                cells.append('*')
            elif grid.is_open(row, col):
                cells.append('o')
            else:
                cells.append('.')
        click.echo(' '.join(cells))

    click.echo(f"Open sites: {grid.number_of_open_sites()}")
    click.echo(f"Percolates: {grid.percolates()}")


# ============================================================================
# Sweep Commands
# ============================================================================

@cli.group()
def sweep():
    """Threshold sweeps over several grid sizes."""
    pass


@sweep.command('summary')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Run config YAML file')
def sweep_summary(config_path):
    """Print what a sweep will compute (without running it)."""
    from ..run import RunConfig

    config = RunConfig.from_yaml(config_path)
    config.print_summary()


@sweep.command('run')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Run config YAML file')
@click.option('--output', '-o', 'output_file', type=click.Path(),
              help='Results CSV (default: from config)')
@click.option('--verbose', '-v', is_flag=True, help='Print every trial')
def sweep_run(config_path, output_file, verbose):
    """Run every grid size in a sweep config and save the results table."""
    from ..run import RunConfig, RunOrchestrator

    try:
        config = RunConfig.from_yaml(config_path)
    except ValueError as e:
        raise click.UsageError(f"Invalid run config: {e}")

    orch = RunOrchestrator(config, verbose=verbose)
    orch.run(save=True, output_file=output_file)
    click.echo("✓ Sweep complete")


@sweep.command('combine')
@click.option('--results-dir', '-d', required=True, type=click.Path(exists=True, file_okay=False),
              help='Directory containing result CSV files')
@click.option('--output', '-o', 'output_file', required=True, type=click.Path(),
              help='Combined CSV output')
@click.option('--pattern', default='*.csv', help='Glob pattern for result files')
def sweep_combine(results_dir, output_file, pattern):
    """Combine result CSV files from separate sweeps."""
    from ..percolation.analysis import combine_result_files

    df = combine_result_files(results_dir, output_file, pattern=pattern)
    click.echo(f"Combined {len(df)} rows")


if __name__ == '__main__':
    cli()
