"""
Launcher that lets the user pick a variant and runs it in a child process.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from sizemap_gen.io.prompter import ChoicePrompter
from sizemap_gen.models import LaunchResult, UnknownVariantError, Variant
from sizemap_gen.orchestration.process import SPAWN_FAILURE_EXIT_CODE, SpawnError, run_command
from sizemap_gen.pipeline.generation import get_profile
from sizemap_gen.utils.session_logger import get_logger


# cli.py sits next to the package, both in a checkout and in site-packages
CLI_PATH = Path(__file__).resolve().parents[2] / "cli.py"

LAUNCH_CHOICES: Dict[str, Variant] = {
    "A": Variant.AUTO_INSERT,
    "E": Variant.STANDARD,
}

CHOICE_HEADER = 'Enter "A" for Autoinsert, or "E" for everything else:'
INVALID_CHOICE_MESSAGE = 'Invalid choice. Please enter "A" or "E".'


def variant_for_choice(choice: str) -> Variant:
    """Map a launcher code (``A``/``E``, any case) to its variant."""
    try:
        return LAUNCH_CHOICES[choice.strip().upper()]
    except KeyError:
        raise UnknownVariantError(f"Unknown launcher choice: {choice!r}") from None


class VariantLauncher:
    """Delegates the terminal to a variant running in its own process."""

    def __init__(
        self,
        python_executable: Optional[str] = None,
        cli_path: Optional[Path] = None,
        runner: Callable[[Sequence[str]], int] = run_command,
        error_stream: Optional[TextIO] = None,
    ):
        """
        Initialize the launcher.

        Args:
            python_executable: Interpreter for the child (default: SIZEMAP_PYTHON
                or the current interpreter).
            cli_path: Script the child runs (default: the bundled cli.py).
            runner: Callable that runs a command and returns its exit code.
            error_stream: Where spawn failures are reported (default: stderr).
        """
        self.python_executable = python_executable or os.getenv("SIZEMAP_PYTHON") or sys.executable
        self.cli_path = Path(cli_path or CLI_PATH)
        self.runner = runner
        self.error_stream = error_stream

    def build_command(self, variant: Variant) -> List[str]:
        """Command line that runs ``variant`` in a fresh interpreter."""
        return [self.python_executable, str(self.cli_path), Variant(variant).value]

    def select_variant(self, prompter: ChoicePrompter) -> Variant:
        """
        Ask for a launcher code until a known one is entered.

        The prompter is closed before returning, whatever the outcome.
        """
        with prompter:
            choice = prompter.choose(CHOICE_HEADER, list(LAUNCH_CHOICES), INVALID_CHOICE_MESSAGE)
            variant = variant_for_choice(choice)
            prompter.say(f"Starting {get_profile(variant).title} ({variant.value})...")
        return variant

    def launch(self, variant: Variant) -> LaunchResult:
        """
        Run ``variant`` as a child process sharing this process's streams.

        Returns:
            LaunchResult with the child's exit code, or the spawn failure code
            if it could not be started.
        """
        logger = get_logger()
        command = self.build_command(variant)
        logger.info("launcher", "child_started", variant=variant.value, command=" ".join(command))

        try:
            exit_code = self.runner(command)
        except SpawnError as e:
            print(f"Failed to start variant: {e}", file=self.error_stream or sys.stderr)
            logger.info("launcher", "spawn_failed", variant=variant.value, error=str(e))
            return LaunchResult(
                variant=variant,
                command=command,
                exit_code=SPAWN_FAILURE_EXIT_CODE,
                started=False,
                error=str(e),
            )

        logger.info("launcher", "child_exited", variant=variant.value, exit_code=exit_code)
        return LaunchResult(variant=variant, command=command, exit_code=exit_code)

    def run(self, prompter: ChoicePrompter) -> int:
        """
        Full launcher flow: choose, delegate, report.

        Returns:
            Exit code the launcher should terminate with.
        """
        variant = self.select_variant(prompter)
        result = self.launch(variant)
        if result.started:
            print(f"Variant {variant.value} exited with code {result.exit_code}")
        return result.exit_code
