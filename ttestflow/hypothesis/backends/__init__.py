"""
t-test backends.

Available backends:
    CPUTTestBackend: CPU reference implementation using scipy.stats
"""

from ttestflow.hypothesis.backends.cpu import CPUTTestBackend

__all__ = [
    "CPUTTestBackend",
]
