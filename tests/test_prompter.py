"""
Tests for interactive prompts.
"""

import os
from io import StringIO

import pytest

from sizemap_gen.io.prompter import ChoicePrompter, Prompter, SizePrompter
from sizemap_gen.models import DeviceType
from sizemap_gen.pipeline.generation import get_profile


def make_prompter(cls, answers):
    return cls(input_stream=StringIO("".join(f"{a}\n" for a in answers)), output_stream=StringIO())


def test_ask_strips_line_ending():
    prompter = Prompter(input_stream=StringIO("150x50\r\n"), output_stream=StringIO())
    assert prompter.ask("Q: ") == "150x50"
    assert prompter.output_stream.getvalue() == "Q: "


def test_ask_raises_on_end_of_input():
    prompter = Prompter(input_stream=StringIO(""), output_stream=StringIO())
    with pytest.raises(EOFError):
        prompter.ask("Q: ")


def test_ask_after_close_fails():
    prompter = make_prompter(Prompter, ["x"])
    with prompter:
        pass
    assert prompter.closed
    with pytest.raises(RuntimeError):
        prompter.ask("Q: ")


def test_get_valid_input_reprompts_until_valid():
    """Test malformed answers are rejected with the diagnostic each time."""
    prompter = make_prompter(SizePrompter, ["abc", "150x50,", "150x50"])
    answer = prompter.get_valid_input("Enter Desktop sizes: ", "Bad format.")

    assert answer == "150x50"
    output = prompter.output_stream.getvalue()
    assert output.count("Enter Desktop sizes: ") == 3
    assert output.count("Bad format.\n") == 2


def test_get_valid_input_accepts_blank_and_null():
    prompter = make_prompter(SizePrompter, ["", "NULL"])
    assert prompter.get_valid_input("Q: ", "Bad.") == ""
    assert prompter.get_valid_input("Q: ", "Bad.") == "NULL"
    assert "Bad." not in prompter.output_stream.getvalue()


def test_collect_asks_devices_in_order():
    profile = get_profile("standard")
    prompter = make_prompter(SizePrompter, ["970x250", "", "null"])

    answers = prompter.collect(profile)

    assert answers == {
        DeviceType.DESKTOP: "970x250",
        DeviceType.TABLET: "",
        DeviceType.MOBILE: "null",
    }
    output = prompter.output_stream.getvalue()
    assert output.startswith(profile.instructions + "\n")
    assert output.index("Enter Desktop sizes: ") < output.index("Enter Tablet sizes: ") < output.index("Enter Mobile sizes: ")


def test_choose_normalizes_and_reprompts():
    prompter = make_prompter(ChoicePrompter, ["x", "  e "])
    choice = prompter.choose("Pick:", ["A", "E"], "Invalid.")

    assert choice == "E"
    output = prompter.output_stream.getvalue()
    assert output.count("Pick:\n") == 2
    assert output.count("Invalid.\n") == 1


def test_say_after_close_fails():
    prompter = make_prompter(Prompter, [])
    prompter.close()
    with pytest.raises(RuntimeError):
        prompter.say("late")


def test_unbuffered_read_stops_at_newline():
    """Test only the answer line is taken from a real file descriptor."""
    read_fd, write_fd = os.pipe()
    os.write(write_fd, "é\nnext\n".encode("utf-8"))
    os.close(write_fd)

    with open(read_fd, "r", encoding="utf-8") as stream:
        prompter = Prompter(input_stream=stream, output_stream=StringIO(), unbuffered=True)
        assert prompter.ask("Q: ") == "é"
        assert os.read(read_fd, 1024) == b"next\n"


def test_unbuffered_read_end_of_input():
    read_fd, write_fd = os.pipe()
    os.close(write_fd)

    with open(read_fd, "r", encoding="utf-8") as stream:
        prompter = ChoicePrompter(input_stream=stream, output_stream=StringIO())
        with pytest.raises(EOFError):
            prompter.ask("> ")


def test_choice_prompter_falls_back_without_file_descriptor():
    prompter = make_prompter(ChoicePrompter, ["a"])
    assert prompter.unbuffered
    assert prompter.choose("Pick:", ["A", "E"], "Invalid.") == "A"
