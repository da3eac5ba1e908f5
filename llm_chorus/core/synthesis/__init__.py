"""Structural synthesis of multi-provider answers."""

from .synthesizer import (
    BUILTIN_POLICIES,
    EXTRACTIVE_PREAMBLE,
    SynthesisEntry,
    Synthesizer,
    extractive_points,
    labeled_concatenation,
    longest_first,
)

__all__ = [
    "BUILTIN_POLICIES",
    "EXTRACTIVE_PREAMBLE",
    "SynthesisEntry",
    "Synthesizer",
    "extractive_points",
    "labeled_concatenation",
    "longest_first",
]
