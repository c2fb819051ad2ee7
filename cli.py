#!/usr/bin/env python3
"""
Command-line interface for the responsive size-map generator.
"""

import argparse
import sys

from dotenv import load_dotenv

from sizemap_gen.io.prompter import ChoicePrompter, SizePrompter
from sizemap_gen.models import Variant
from sizemap_gen.orchestration.launcher import VariantLauncher
from sizemap_gen.pipeline.generation import SizeMapGenerator

# Load environment variables
load_dotenv()


def cmd_variant(args):
    """Run one size-map variant in this process."""
    generator = SizeMapGenerator(Variant(args.command))
    generator.run(SizePrompter())
    return 0


def cmd_launch(args):
    """Pick a variant interactively and run it as a child process."""
    launcher = VariantLauncher(python_executable=args.python)
    return launcher.run(ChoicePrompter())


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate responsive slot size maps from WidthxHeight input",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Launch command
    launch_parser = subparsers.add_parser("launch", help="Choose a variant and run it (default)")
    launch_parser.add_argument("--python", help="Interpreter for the variant process (default: current)")

    # Variant commands
    subparsers.add_parser(
        Variant.AUTO_INSERT.value,
        help="Primary sizes plus per-device extensions (sizes/envs/envExt)"
    )
    subparsers.add_parser(
        Variant.STANDARD.value,
        help="Breakpoint list, blank devices omitted (sizeMap)"
    )
    subparsers.add_parser(
        Variant.REFERENCE.value,
        help="Full breakpoint table, one entry per device (sizeMap)"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        args = parser.parse_args(["launch"])

    try:
        if args.command == "launch":
            return cmd_launch(args)
        return cmd_variant(args)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user", file=sys.stderr)
        return 130
    except EOFError as e:
        print(f"\n❌ Error: {str(e)}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"\n❌ Error: {str(e)}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
