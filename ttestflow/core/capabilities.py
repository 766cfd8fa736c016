"""
Capability string constants for ttestflow.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from ttestflow.core.capabilities import CAPABILITY_MATERIALIZED

    if ds.supports(CAPABILITY_MATERIALIZED):
        values = ds['weight']
"""

# Data can be returned as full numpy arrays in memory
CAPABILITY_MATERIALIZED = 'materialized'

# Data can be iterated multiple times (residuals after a test)
CAPABILITY_REPEATABLE = 'repeatable'

# At least one column holds categorical labels rather than numbers
CAPABILITY_CATEGORICAL = 'categorical'

ALL_CAPABILITIES = frozenset({
    CAPABILITY_MATERIALIZED,
    CAPABILITY_REPEATABLE,
    CAPABILITY_CATEGORICAL,
})

__all__ = [
    'CAPABILITY_MATERIALIZED',
    'CAPABILITY_REPEATABLE',
    'CAPABILITY_CATEGORICAL',
    'ALL_CAPABILITIES',
]
