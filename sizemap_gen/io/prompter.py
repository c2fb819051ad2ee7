"""
Line-oriented prompts over explicit input/output streams.
"""

import os
import sys
from typing import Dict, Optional, Sequence, TextIO

from sizemap_gen.io.size_parser import is_valid_input
from sizemap_gen.models import DEVICE_ORDER, DeviceType, VariantProfile
from sizemap_gen.utils.session_logger import get_logger


class Prompter:
    """Asks questions on an output stream and reads answers from an input stream."""

    unbuffered = False

    def __init__(
        self,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        unbuffered: Optional[bool] = None,
    ):
        """
        Initialize the prompter.

        Args:
            input_stream: Stream to read answers from (default: stdin).
            output_stream: Stream for questions and messages (default: stdout).
            unbuffered: Read answers byte by byte from the stream's file
                descriptor, so nothing past the answer's newline is consumed
                (default: class setting).
        """
        self.input_stream = input_stream or sys.stdin
        self.output_stream = output_stream or sys.stdout
        if unbuffered is not None:
            self.unbuffered = unbuffered
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def close(self):
        """
        Release the streams.

        The process-wide stdin/stdout are never closed, since they are handed
        to child processes after the prompter is done with them.
        """
        if self.closed:
            return
        self.output_stream.flush()
        self.closed = True

    def _check_open(self):
        if self.closed:
            raise RuntimeError("Prompter is closed")

    def _input_fd(self) -> Optional[int]:
        try:
            return self.input_stream.fileno()
        except (AttributeError, OSError, ValueError):
            return None

    def _read_line(self) -> str:
        """Read one line, leaving everything after its newline unread."""
        fd = self._input_fd() if self.unbuffered else None
        if fd is None:
            return self.input_stream.readline()

        data = bytearray()
        while True:
            chunk = os.read(fd, 1)
            if not chunk:
                break
            data += chunk
            if chunk == b"\n":
                break
        encoding = getattr(self.input_stream, "encoding", None) or "utf-8"
        return data.decode(encoding, errors="replace")

    def say(self, message: str):
        """Print a full line of output."""
        self._check_open()
        self.output_stream.write(message + "\n")
        self.output_stream.flush()

    def ask(self, query: str) -> str:
        """
        Ask a question and return the answer without its line ending.

        Raises:
            RuntimeError: If the prompter has been closed.
            EOFError: If the input stream is exhausted.
        """
        self._check_open()

        self.output_stream.write(query)
        self.output_stream.flush()

        line = self._read_line()
        if line == "":
            raise EOFError("Input stream closed while waiting for an answer")
        return line.rstrip("\r\n")


class SizePrompter(Prompter):
    """Collects validated size lists for each device category."""

    def get_valid_input(self, prompt_message: str, invalid_message: str) -> str:
        """
        Ask until the answer is a valid size list, empty, or ``null``.

        Args:
            prompt_message: Question to ask.
            invalid_message: Diagnostic printed after each rejected answer.

        Returns:
            The first accepted answer.
        """
        logger = get_logger()
        while True:
            answer = self.ask(prompt_message)
            if is_valid_input(answer):
                return answer
            logger.debug("prompter", "input_rejected", prompt=prompt_message.strip(), value=answer)
            self.say(invalid_message)

    def collect(
        self,
        profile: VariantProfile,
        devices: Sequence[DeviceType] = DEVICE_ORDER,
    ) -> Dict[DeviceType, str]:
        """
        Print the variant instructions and collect one answer per device.

        Args:
            profile: Variant wording for instructions and diagnostics.
            devices: Devices to ask for, in order.

        Returns:
            Raw accepted answers keyed by device type.
        """
        self.say(profile.instructions)
        return {
            device_type: self.get_valid_input(
                profile.prompt_for(device_type),
                profile.invalid_format_message,
            )
            for device_type in devices
        }


class ChoicePrompter(Prompter):
    """Asks for one of a fixed set of single-word choices."""

    # the answer arrives on stdin that a child process inherits next
    unbuffered = True

    def choose(
        self,
        header: str,
        choices: Sequence[str],
        invalid_message: str,
        prompt: str = "> ",
    ) -> str:
        """
        Ask until the trimmed, upper-cased answer is one of ``choices``.

        Returns:
            The normalized choice.
        """
        accepted = {choice.upper() for choice in choices}
        while True:
            self.say(header)
            answer = self.ask(prompt).strip().upper()
            if answer in accepted:
                return answer
            self.say(invalid_message)
