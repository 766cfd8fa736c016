"""
Plotting module.

Public API:
    mean_se_plot(values, groups)  - group means with SE bars, optional raw overlay
    qq_plot(assessment)           - normal QQ plot of residuals
    residual_histogram(r)         - residual histogram with a normal overlay
"""

from ttestflow.plotting._figures import mean_se_plot, qq_plot, residual_histogram

__all__ = [
    "mean_se_plot",
    "qq_plot",
    "residual_histogram",
]
