"""
Figures for the t-test workflow.

All functions draw with matplotlib and return the Figure. Nothing is shown
or written to disk here; the caller decides what to do with the figure.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from scipy import stats as sp_stats

from ttestflow.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_labels,
    check_min_samples,
)
from ttestflow.descriptive import group_summary
from ttestflow.diagnostics import normal_qq
from ttestflow.diagnostics._common import QQPairs
from ttestflow.diagnostics.solution import NormalityAssessment, ResidualSet
from ttestflow.hypothesis.solution import format_pvalue

MEAN_COLOR = "black"
POINT_COLOR = "#4c72b0"
LINE_COLOR = "#c44e52"


def _figure_and_axes(ax: Axes | None, figsize: tuple[float, float]) -> tuple[Figure, Axes]:
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
        return fig, ax
    return ax.figure, ax


def mean_se_plot(
    values: ArrayLike,
    groups: ArrayLike | None = None,
    *,
    overlay: bool = False,
    ax: Axes | None = None,
    jitter: float = 0.08,
    seed: int = 0,
    ylabel: str = "value",
    title: str | None = None,
) -> Figure:
    """
    Group means with standard-error bars.

    Parameters
    ----------
    values : array-like
        Measurements.
    groups : array-like or None
        Group label of every measurement; None plots a single group.
    overlay : bool
        Also scatter the raw observations behind the means, with a small
        deterministic horizontal jitter.
    ax : Axes or None
        Draw into an existing Axes instead of a new figure.
    """
    summary = group_summary(values, groups)
    fig, ax = _figure_and_axes(ax, (5.0, 4.0))
    positions = np.arange(len(summary.labels), dtype=np.float64)

    if overlay:
        x = check_array(values, "values")
        check_1d(x, "values")
        labels = (
            np.full(len(x), summary.labels[0]) if groups is None
            else check_labels(groups, "groups")
        )
        rng = np.random.default_rng(seed)
        for pos, level in zip(positions, summary.labels):
            pts = x[(labels == level) & ~np.isnan(x)]
            offsets = rng.uniform(-jitter, jitter, size=len(pts))
            ax.scatter(pos + offsets, pts, color=POINT_COLOR, alpha=0.5, s=18, zorder=1)

    ax.errorbar(
        positions,
        summary.mean,
        yerr=np.nan_to_num(summary.se),
        fmt="o",
        color=MEAN_COLOR,
        capsize=6,
        markersize=7,
        zorder=2,
    )
    ax.set_xticks(positions)
    ax.set_xticklabels(summary.labels)
    ax.set_xlim(-0.5, len(positions) - 0.5)
    ax.set_ylabel(ylabel)
    ax.set_title(title if title is not None else "Mean ± SE")
    return fig


def qq_plot(
    data: NormalityAssessment | QQPairs | ResidualSet | ArrayLike,
    *,
    ax: Axes | None = None,
    title: str | None = None,
) -> Figure:
    """
    Normal QQ plot with a reference line through the quartiles.

    Accepts a NormalityAssessment (its W and p-value go in the title), QQ
    pairs, a ResidualSet, or raw residuals.
    """
    assessment = data if isinstance(data, NormalityAssessment) else None
    if assessment is not None:
        qq = assessment.qq_pairs
    elif isinstance(data, QQPairs):
        qq = data
    else:
        qq = normal_qq(data)

    fig, ax = _figure_and_axes(ax, (4.5, 4.5))
    ax.scatter(qq.theoretical, qq.sample, color=POINT_COLOR, s=18)

    slope, intercept = _quartile_line(qq.sample)
    lo, hi = float(np.min(qq.theoretical)), float(np.max(qq.theoretical))
    xs = np.array([lo, hi])
    ax.plot(xs, intercept + slope * xs, color=LINE_COLOR, linewidth=1.2)

    ax.set_xlabel("Theoretical quantiles")
    ax.set_ylabel("Sample quantiles")
    if title is None:
        title = "Normal Q-Q plot"
        if assessment is not None and assessment.applicable:
            title += (
                f"\nW = {assessment.statistic:.4f}, "
                f"p = {format_pvalue(assessment.p_value)}"
            )
    ax.set_title(title)
    return fig


def residual_histogram(
    residuals: ResidualSet | ArrayLike,
    *,
    bins: int | str = "auto",
    show_normal: bool = True,
    ax: Axes | None = None,
    title: str | None = None,
) -> Figure:
    """
    Histogram of residuals on the density scale.

    With show_normal=True, overlays the normal density with the residuals'
    own mean and standard deviation.
    """
    r = check_array(residuals, "residuals").astype(np.float64)
    check_1d(r, "residuals")
    check_finite(r, "residuals")
    check_min_samples(r, 1, "residuals")
    fig, ax = _figure_and_axes(ax, (5.0, 4.0))
    ax.hist(r, bins=bins, density=True, color=POINT_COLOR, alpha=0.6, edgecolor="white")

    if show_normal and len(r) > 1 and np.std(r, ddof=1) > 0:
        grid = np.linspace(np.min(r), np.max(r), 200)
        density = sp_stats.norm.pdf(grid, loc=np.mean(r), scale=np.std(r, ddof=1))
        ax.plot(grid, density, color=LINE_COLOR, linewidth=1.2)

    ax.set_xlabel("Residual")
    ax.set_ylabel("Density")
    ax.set_title(title if title is not None else "Residuals")
    return fig


def _quartile_line(sample: NDArray[np.floating[Any]]) -> tuple[float, float]:
    """Slope and intercept of the line through the first and third quartiles."""
    y1, y2 = np.quantile(sample, [0.25, 0.75])
    x1, x2 = sp_stats.norm.ppf([0.25, 0.75])
    slope = (y2 - y1) / (x2 - x1)
    return float(slope), float(y1 - slope * x1)
