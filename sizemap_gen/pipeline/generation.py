"""
Prompt-and-emit pipeline for a single size-map variant.
"""

import json
import sys
from typing import Dict, List, Optional, TextIO

from sizemap_gen.io.prompter import SizePrompter
from sizemap_gen.io.size_parser import parse_device_sizes
from sizemap_gen.models import (
    DEVICE_ORDER,
    DeviceSizes,
    DeviceType,
    UnknownVariantError,
    Variant,
    VariantProfile,
)
from sizemap_gen.pipeline.assembler import SizeMap, assemble, needs_size_config
from sizemap_gen.utils.session_logger import get_logger


NO_CONFIG_MESSAGE = "No size config needed"


PROFILES: Dict[Variant, VariantProfile] = {
    Variant.AUTO_INSERT: VariantProfile(
        variant=Variant.AUTO_INSERT,
        title="Autoinsert",
        instructions=(
            "Enter sizes in WidthxHeight format (comma-separated, e.g., 150x50). "
            "Leave empty to skip or type 'null' to set a null value."
        ),
        invalid_format_message=(
            "Invalid format. Enter sizes in WidthxHeight format (e.g., 150x50), "
            "or type 'null' to set a null value."
        ),
    ),
    Variant.STANDARD: VariantProfile(
        variant=Variant.STANDARD,
        title="Everything else",
        instructions=(
            "Enter sizes in comma separated WidthxHeight format (without spaces). "
            "Leave empty to skip, or type 'null' to set a null value."
        ),
        invalid_format_message=(
            "Format is not correct. Please enter sizes in WidthxHeight format (e.g., 150x50), "
            "or type 'null' to use a null value."
        ),
    ),
    Variant.REFERENCE: VariantProfile(
        variant=Variant.REFERENCE,
        title="Reference",
        instructions=(
            "Enter sizes in comma separated WidthxHeight format (without spaces). "
            "Leave empty to skip, or type 'null' to set a null value."
        ),
        invalid_format_message=(
            "Format is not correct. Please enter sizes in WidthxHeight format (e.g., 150x50), "
            "or type 'null' to use a null value."
        ),
    ),
}


def get_profile(variant: Variant) -> VariantProfile:
    """Look up the wording for a variant."""
    try:
        return PROFILES[Variant(variant)]
    except ValueError:
        raise UnknownVariantError(f"Unknown variant: {variant}") from None


class SizeMapGenerator:
    """Runs one variant: collect sizes, assemble the size map, print it."""

    def __init__(self, variant: Variant):
        """
        Initialize the generator.

        Args:
            variant: Which assembly policy and wording to use.
        """
        self.profile = get_profile(variant)
        self.variant = self.profile.variant

    def parse_inputs(self, raw_inputs: Dict[DeviceType, str]) -> List[DeviceSizes]:
        """Parse accepted answers into device results, in device order."""
        return [
            parse_device_sizes(raw_inputs.get(device_type, ""), device_type)
            for device_type in DEVICE_ORDER
        ]

    def generate(self, raw_inputs: Dict[DeviceType, str]) -> Optional[SizeMap]:
        """
        Build the size map from raw answers.

        Args:
            raw_inputs: Accepted answers keyed by device type; missing devices
                count as blank.

        Returns:
            The size map, or None when the standard variant has nothing to
            configure.
        """
        results = self.parse_inputs(raw_inputs)
        if self.variant == Variant.STANDARD and not needs_size_config(results):
            return None
        return assemble(self.variant, results)

    def format_output(self, size_map: Optional[SizeMap]) -> str:
        """Render the size map as 2-space indented JSON, or the no-config line."""
        if size_map is None:
            return NO_CONFIG_MESSAGE
        return json.dumps(size_map, indent=2)

    def run(
        self,
        prompter: SizePrompter,
        output_stream: Optional[TextIO] = None,
    ) -> Optional[SizeMap]:
        """
        Run the full interactive flow on the given prompter.

        The prompter is closed once all answers are collected; the result is
        printed to ``output_stream`` (default: stdout).

        Returns:
            The size map that was printed, or None if no config was needed.
        """
        with prompter:
            raw_inputs = prompter.collect(self.profile)

        size_map = self.generate(raw_inputs)
        print(self.format_output(size_map), file=output_stream or sys.stdout)

        get_logger().info(
            "generator",
            "variant_completed",
            variant=self.variant.value,
            configured=size_map is not None,
        )
        return size_map
