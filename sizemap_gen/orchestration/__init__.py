"""
Launcher that hands the terminal to a chosen size-map variant.

The launcher reads one choice, releases its prompt, and runs the variant in a
child process that inherits the standard streams.
"""

from sizemap_gen.orchestration.launcher import (
    LAUNCH_CHOICES,
    VariantLauncher,
    variant_for_choice,
)
from sizemap_gen.orchestration.process import SpawnError, run_command

__all__ = [
    "LAUNCH_CHOICES",
    "VariantLauncher",
    "variant_for_choice",
    "SpawnError",
    "run_command",
]
