"""Mixin classes for result dataclasses.

This module provides common formatting utilities for result summaries.
"""

from __future__ import annotations

from typing import Any

import numpy as np


class ResultSummaryMixin:
    """Common formatting utilities for result summaries.

    Provides helper methods for generating human-readable summary reports
    with consistent formatting across all result types.
    """

    @staticmethod
    def _format_header(title: str, width: int = 80) -> str:
        """Format a report header centered between two borders."""
        border = "=" * width
        padding = (width - len(title)) // 2
        return f"{border}\n{' ' * padding}{title}\n{border}"

    @staticmethod
    def _format_value(value: Any) -> str:
        """Format a scalar for display."""
        if isinstance(value, bool):
            return "Yes" if value else "No"
        if isinstance(value, (float, np.floating)):
            value = float(value)
            if abs(value) < 0.0001 and value != 0:
                return f"{value:.4e}"
            if abs(value) >= 1000:
                return f"{value:,.2f}"
            return f"{value:.4f}"
        if value is None:
            return "N/A"
        return str(value)

    @staticmethod
    def _format_metric(label: str, value: Any, width: int = 40) -> str:
        """Format a label-value pair joined by a dotted leader.

        Args:
            label: Metric name
            value: Metric value
            width: Total width for alignment

        Returns:
            Formatted metric string
        """
        formatted_value = ResultSummaryMixin._format_value(value)
        dots = "." * max(1, width - len(label) - len(formatted_value) - 2)
        return f"  {label} {dots} {formatted_value}"

    @staticmethod
    def _format_vector(values: Any, max_items: int = 6) -> str:
        """Format a 1D array as ``[a, b, ...]`` with truncation."""
        arr = np.atleast_1d(np.asarray(values, dtype=np.float64))
        shown = ", ".join(f"{v:.4f}" for v in arr[:max_items])
        if arr.shape[0] > max_items:
            shown += f", ... ({arr.shape[0] - max_items} more)"
        return f"[{shown}]"

    @staticmethod
    def _format_section(title: str) -> str:
        """Format a section subheader."""
        return f"\n{title}:\n{'-' * len(title)}"

    @staticmethod
    def _format_footer(computation_time_ms: float, width: int = 80) -> str:
        """Format the report footer with computation time."""
        border = "=" * width
        if computation_time_ms < 1000:
            time_str = f"{computation_time_ms:.2f} ms"
        else:
            time_str = f"{computation_time_ms / 1000:.2f} s"
        return f"\nComputation Time: {time_str}\n{border}"
