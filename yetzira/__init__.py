"""Yetzira: production and shipping status dashboard for Yetzira Towers.

Tracks units (floor/facade production records), containers and the ships
carrying them, and derives:
  - project metrics (overall progress, completed/remaining/in-production units)
  - a display category for every status label
  - the floor x facade project grid
"""

__version__ = "0.1.0"
__description__ = "Production and shipping status dashboard for a multi-unit construction project"

from yetzira.monitor.projection import DashboardProjection, build_view
from yetzira.cli.app import app as cli

__all__ = ["DashboardProjection", "build_view", "cli", "__version__"]
