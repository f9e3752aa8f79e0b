"""
Site Percolation - percolation grids and threshold estimation.

This package provides tools for:
- Incremental top-to-bottom connectivity on an n-by-n site grid
- Monte Carlo estimation of the percolation threshold with confidence bounds
- YAML-configured sweeps over grid sizes with CSV results
"""

__version__ = "1.0.0"
