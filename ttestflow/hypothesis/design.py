"""
TTestDesign: validated, immutable input for a t-test.

Factory classmethods turn raw samples (or a value column plus a grouping
column) into a design whose `test_type` tells the backend which variant
to run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from ttestflow.core.exceptions import ValidationError, DimensionError
from ttestflow.core.validation import check_array, check_1d, check_labels
from ttestflow.hypothesis._common import VALID_ALTERNATIVES


def _validate_alternative(alternative: str) -> str:
    """Validate and return alternative hypothesis string."""
    if alternative not in VALID_ALTERNATIVES:
        raise ValidationError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
        )
    return alternative


def _validate_conf_level(conf_level: float) -> float:
    """Validate confidence level is in (0, 1)."""
    if not (0.0 < conf_level < 1.0):
        raise ValidationError(
            f"confidence_level must be in (0, 1), got {conf_level}"
        )
    return float(conf_level)


def _to_float64_1d(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Convert to 1D float64 array without dropping anything."""
    arr = check_array(x, name).astype(np.float64)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    check_1d(arr, name)
    return arr


def _drop_nan(arr: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    return arr[~np.isnan(arr)]


def _require_n(arr: NDArray[np.floating[Any]], name: str) -> None:
    if len(arr) < 2:
        raise ValidationError(
            f"Need at least 2 non-missing observations in {name} to estimate "
            f"a variance, got {len(arr)}"
        )


@dataclass(frozen=True)
class TTestDesign:
    """
    Design for t-tests.

    `test_type` is one of 't_one_sample', 't_paired', 't_two_sample'.
    For 't_paired', `x` already holds the element-wise differences.

    Do not construct directly; use factory classmethods.
    """
    test_type: str
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]] | None = None
    _null_mean: float = 0.0
    _alternative: str = "two-sided"
    _conf_level: float = 0.95
    _equal_variance: bool = True
    _paired: bool = False
    _n_dropped: int = 0
    _data_name: str = "x"
    _group_levels: tuple[str, str] | None = None

    # --- Properties ---

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def null_mean(self) -> float:
        return self._null_mean

    @property
    def alternative(self) -> str:
        return self._alternative

    @property
    def conf_level(self) -> float:
        return self._conf_level

    @property
    def equal_variance(self) -> bool:
        return self._equal_variance

    @property
    def paired(self) -> bool:
        return self._paired

    @property
    def n_dropped(self) -> int:
        """Number of observations (or pairs) removed because of NaN."""
        return self._n_dropped

    @property
    def data_name(self) -> str:
        return self._data_name

    @property
    def group_levels(self) -> tuple[str, str] | None:
        """The two group labels, in (sample_a, sample_b) order."""
        return self._group_levels

    # --- Factory classmethods ---

    @classmethod
    def for_t_test(
        cls,
        sample_a: ArrayLike,
        sample_b: ArrayLike | None = None,
        *,
        paired: bool = False,
        equal_variance: bool = True,
        alternative: str = "two-sided",
        null_mean: float = 0.0,
        confidence_level: float = 0.95,
        data_name: str | None = None,
    ) -> TTestDesign:
        """Build design for run_test()."""
        alternative = _validate_alternative(alternative)
        conf_level = _validate_conf_level(confidence_level)
        null_mean = float(null_mean)
        if not np.isfinite(null_mean):
            raise ValidationError(f"null_mean must be finite, got {null_mean}")

        a_raw = _to_float64_1d(sample_a, "sample_a")

        if sample_b is None:
            if paired:
                raise ValidationError("paired=True requires sample_b")
            x = _drop_nan(a_raw)
            _require_n(x, "sample_a")
            return cls(
                test_type="t_one_sample",
                _x=x,
                _null_mean=null_mean,
                _alternative=alternative,
                _conf_level=conf_level,
                _n_dropped=len(a_raw) - len(x),
                _data_name=data_name or "x",
            )

        b_raw = _to_float64_1d(sample_b, "sample_b")

        if paired:
            if len(a_raw) != len(b_raw):
                raise DimensionError(
                    f"Paired t-test requires equal lengths: "
                    f"len(sample_a)={len(a_raw)}, len(sample_b)={len(b_raw)}"
                )
            diffs = a_raw - b_raw
            d = _drop_nan(diffs)
            if len(d) < 2:
                raise ValidationError(
                    f"Need at least 2 non-missing paired differences, got {len(d)}"
                )
            return cls(
                test_type="t_paired",
                _x=d,
                _null_mean=null_mean,
                _alternative=alternative,
                _conf_level=conf_level,
                _paired=True,
                _n_dropped=len(diffs) - len(d),
                _data_name=data_name or "x and y",
            )

        x = _drop_nan(a_raw)
        y = _drop_nan(b_raw)
        _require_n(x, "sample_a")
        _require_n(y, "sample_b")
        return cls(
            test_type="t_two_sample",
            _x=x,
            _y=y,
            _null_mean=null_mean,
            _alternative=alternative,
            _conf_level=conf_level,
            _equal_variance=bool(equal_variance),
            _n_dropped=(len(a_raw) - len(x)) + (len(b_raw) - len(y)),
            _data_name=data_name or "x and y",
        )

    @classmethod
    def from_groups(
        cls,
        values: ArrayLike,
        groups: ArrayLike,
        *,
        ids: ArrayLike | None = None,
        paired: bool = False,
        equal_variance: bool = True,
        alternative: str = "two-sided",
        null_mean: float = 0.0,
        confidence_level: float = 0.95,
    ) -> TTestDesign:
        """
        Build a two-sample or paired design from long-format columns.

        `groups` must contain exactly two distinct labels. Levels are taken
        in sorted order; the first level becomes sample_a. For a paired
        design, `ids` matches each observation in one group to the
        observation with the same identifier in the other. Without `ids`,
        pairing falls back to order of appearance within each group.
        """
        vals = _to_float64_1d(values, "values")
        labels = check_labels(groups, "groups")
        if len(labels) != len(vals):
            raise DimensionError(
                f"Inconsistent lengths: values={len(vals)}, groups={len(labels)}"
            )

        levels = sorted(set(labels.tolist()))
        if len(levels) != 2:
            raise ValidationError(
                f"A two-sample t-test needs exactly 2 groups, got {len(levels)}: {levels}"
            )
        level_a, level_b = levels
        mask_a = labels == level_a
        mask_b = labels == level_b

        if paired and ids is not None:
            a, b = _align_by_id(vals, labels, ids, level_a, level_b)
        else:
            a, b = vals[mask_a], vals[mask_b]

        design = cls.for_t_test(
            a, b,
            paired=paired,
            equal_variance=equal_variance,
            alternative=alternative,
            null_mean=null_mean,
            confidence_level=confidence_level,
            data_name=f"{level_a} and {level_b}",
        )
        return cls(
            test_type=design.test_type,
            _x=design.x,
            _y=design.y,
            _null_mean=design.null_mean,
            _alternative=design.alternative,
            _conf_level=design.conf_level,
            _equal_variance=design.equal_variance,
            _paired=design.paired,
            _n_dropped=design.n_dropped,
            _data_name=design.data_name,
            _group_levels=(level_a, level_b),
        )

    def __repr__(self) -> str:
        if self._y is not None:
            return (
                f"TTestDesign(test_type={self.test_type!r}, "
                f"n_x={len(self._x)}, n_y={len(self._y)})"
            )
        return f"TTestDesign(test_type={self.test_type!r}, n={len(self._x)})"


def _align_by_id(
    values: NDArray[np.floating[Any]],
    labels: NDArray[np.str_],
    ids: ArrayLike,
    level_a: str,
    level_b: str,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Reorder the two groups so that position i holds the same individual."""
    id_labels = check_labels(ids, "ids")
    if len(id_labels) != len(values):
        raise DimensionError(
            f"Inconsistent lengths: values={len(values)}, ids={len(id_labels)}"
        )

    by_level: dict[str, dict[str, float]] = {level_a: {}, level_b: {}}
    for value, label, ident in zip(values, labels, id_labels):
        seen = by_level[label]
        if ident in seen:
            raise ValidationError(
                f"identifier {ident!r} appears more than once in group {label!r}"
            )
        seen[ident] = value

    ids_a = set(by_level[level_a])
    ids_b = set(by_level[level_b])
    unmatched = sorted(ids_a ^ ids_b)
    if unmatched:
        raise ValidationError(
            f"Paired t-test requires every identifier in both groups; "
            f"unmatched: {unmatched}"
        )

    order = sorted(ids_a)
    a = np.array([by_level[level_a][i] for i in order], dtype=np.float64)
    b = np.array([by_level[level_b][i] for i in order], dtype=np.float64)
    return a, b
