"""
Core utilities package for the letter relay.

This package provides the immutable configuration and the step-result
plumbing shared by the letter flows.
"""

from .config import RelayConfig
from .pipeline import StepResult, classify_error, run_step

__all__ = [
    # Config
    "RelayConfig",
    # Pipeline
    "StepResult",
    "classify_error",
    "run_step",
]
