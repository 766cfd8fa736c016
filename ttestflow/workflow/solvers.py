"""
The assumption-checked t-test workflow.

analyze() threads data explicitly through the stages: the DataSource
gives up arrays, the test consumes them, residuals are computed from the
same arrays, and the normality evidence is computed from the residuals.
No stage mutates anything an earlier stage produced.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
import numpy as np
from numpy.typing import NDArray

from ttestflow.core.datasource import DataSource
from ttestflow.core.exceptions import ValidationError
from ttestflow.descriptive import group_summary
from ttestflow.diagnostics import compute_residuals, check_normality
from ttestflow.hypothesis import run_test, run_grouped_test
from ttestflow.hypothesis._common import Alternative
from ttestflow.workflow.solution import WorkflowReport


def analyze(
    source: DataSource | str | Path,
    value: str,
    *,
    group: str | None = None,
    second: str | None = None,
    ids: str | None = None,
    paired: bool = False,
    equal_variance: bool = True,
    alternative: Alternative = "two-sided",
    null_mean: float = 0.0,
    confidence_level: float = 0.95,
) -> WorkflowReport:
    """
    Run the test, the residual diagnostics and the group summary.

    Parameters
    ----------
    source : DataSource or path
        The data, or a .csv/.tsv path to load it from.
    value : str
        Numeric column with the measurements.
    group : str or None
        Long format: categorical column with exactly two levels.
    second : str or None
        Wide format: a second numeric column compared against `value`.
    ids : str or None
        Identifier column aligning pairs across the two levels of `group`.
    paired, equal_variance, alternative, null_mean, confidence_level
        Passed to the t-test unchanged.

    With neither `group` nor `second`, a one-sample test of `value`
    against `null_mean` is run.
    """
    ds = source if isinstance(source, DataSource) else DataSource.from_file(source)

    if group is not None and second is not None:
        raise ValidationError("give either group (long format) or second (wide format), not both")
    if ids is not None and not (group is not None and paired):
        raise ValidationError("ids only applies to a paired test with a group column")

    test_kwargs: dict[str, Any] = dict(
        paired=paired,
        equal_variance=equal_variance,
        alternative=alternative,
        null_mean=null_mean,
        confidence_level=confidence_level,
    )
    x = ds.numeric(value)

    if group is not None:
        labels = ds.labels(group)
        test = run_grouped_test(
            x, labels,
            ids=ds.labels(ids) if ids is not None else None,
            **test_kwargs,
        )
        summary = group_summary(x, labels)
        if paired:
            residuals = compute_residuals(test.design.x)
        else:
            keep = ~np.isnan(x)
            residuals = compute_residuals(x[keep], labels[keep])

    elif second is not None:
        y = ds.numeric(second)
        test = run_test(x, y, **test_kwargs)
        stacked, stacked_labels = _stack(x, y, value, second)
        summary = group_summary(stacked, stacked_labels)
        if paired:
            residuals = compute_residuals(test.design.x)
        else:
            keep = ~np.isnan(stacked)
            residuals = compute_residuals(stacked[keep], stacked_labels[keep])

    else:
        if paired:
            raise ValidationError("a paired test needs a group or a second column")
        test = run_test(x, **test_kwargs)
        summary = group_summary(x)
        residuals = compute_residuals(test.design.x)

    normality = check_normality(residuals)

    return WorkflowReport(
        test=test,
        residuals=residuals,
        normality=normality,
        groups=summary,
        columns={'value': value, 'group': group, 'second': second, 'ids': ids},
    )


def _stack(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    x_name: str,
    y_name: str,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.str_]]:
    """Two wide columns as one long value column plus labels."""
    values = np.concatenate([x, y])
    labels = np.array([x_name] * len(x) + [y_name] * len(y), dtype=str)
    return values, labels
