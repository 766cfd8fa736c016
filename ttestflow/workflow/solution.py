"""
Workflow report type.

WorkflowReport bundles the immutable outputs of one analyze() run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ttestflow.descriptive.solution import GroupSummary
from ttestflow.diagnostics.solution import NormalityAssessment, ResidualSet
from ttestflow.hypothesis.solution import TTestSolution


@dataclass(frozen=True)
class WorkflowReport:
    """
    Everything one pass of the workflow produced.

    Attributes:
        test: The t-test result
        residuals: Residuals about the means the test compared
        normality: QQ pairs and Shapiro-Wilk evidence for those residuals
        groups: n, mean, sd and se per group
        columns: The DataSource columns that were analysed
    """
    test: TTestSolution
    residuals: ResidualSet
    normality: NormalityAssessment
    groups: GroupSummary
    columns: dict[str, str | None]

    @property
    def warnings(self) -> tuple[str, ...]:
        """Warnings from every stage, in workflow order."""
        return (
            self.test.warnings
            + self.groups.warnings
            + self.normality.warnings
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'columns': dict(self.columns),
            'test': self.test.to_dict(),
            'normality': {
                'method': self.normality.method,
                'n': self.normality.n,
                'statistic': self.normality.statistic,
                'p_value': self.normality.p_value,
                'applicable': self.normality.applicable,
                'reason': self.normality.reason,
            },
            'groups': {
                label: self.groups.row(label) for label in self.groups.labels
            },
        }

    def summary(self) -> str:
        parts = [
            self.test.summary(),
            "Group summary:",
            self.groups.summary(),
            "",
            "Residual normality:",
            self.normality.summary(),
        ]
        if self.warnings:
            parts.append("Warnings:")
            parts.extend(f"  - {w}" for w in self.warnings)
            parts.append("")
        return "\n".join(parts)

    def __repr__(self) -> str:
        return f"WorkflowReport(test={self.test!r}, normality={self.normality!r})"
