"""Sweep definition and orchestration."""

from .manifest import RunConfig
from .orchestrator import RunOrchestrator

__all__ = ['RunConfig', 'RunOrchestrator']
