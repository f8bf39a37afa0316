"""Shared pytest configuration: render headlessly."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg", force=True)
