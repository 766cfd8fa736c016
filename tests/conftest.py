"""
pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest


SITE_A = [5.1, 4.9, 5.6, 5.8, 6.0, 5.3]
SITE_B = [6.2, 6.8, 5.9, 7.1, 6.5, 6.9]
BEFORE = [12.1, 11.4, 13.0, 12.7, 11.9, 12.3, 13.4]
AFTER = [12.9, 11.8, 13.9, 13.1, 12.2, 13.3, 13.6]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def two_group_csv(tmp_path):
    """Long-format file: one weight per crab, two sites."""
    path = tmp_path / "crabs.csv"
    rows = ["crab,site,weight"]
    for i, w in enumerate(SITE_A):
        rows.append(f"a{i},north,{w}")
    for i, w in enumerate(SITE_B):
        rows.append(f"b{i},south,{w}")
    path.write_text("\n".join(rows) + "\n")
    return path


@pytest.fixture
def paired_long_csv(tmp_path):
    """Long-format paired file with rows deliberately out of order."""
    path = tmp_path / "paired.csv"
    rows = ["plant,time,height"]
    order = [3, 0, 6, 1, 5, 2, 4]
    for i in order:
        rows.append(f"p{i},after,{AFTER[i]}")
    for i in reversed(order):
        rows.append(f"p{i},before,{BEFORE[i]}")
    path.write_text("\n".join(rows) + "\n")
    return path


@pytest.fixture
def wide_csv(tmp_path):
    """Wide-format file: one row per plant, before and after columns."""
    path = tmp_path / "wide.csv"
    rows = ["plant,before,after"]
    for i, (b, a) in enumerate(zip(BEFORE, AFTER)):
        rows.append(f"p{i},{b},{a}")
    path.write_text("\n".join(rows) + "\n")
    return path


@pytest.fixture
def site_samples():
    """The two site samples behind two_group_csv."""
    return np.array(SITE_A), np.array(SITE_B)


@pytest.fixture
def paired_samples():
    """(before, after) measurements behind paired_long_csv and wide_csv."""
    return np.array(BEFORE), np.array(AFTER)
