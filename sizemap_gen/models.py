"""
Data models and schemas for the size-map generator.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field


SizePair = Tuple[int, int]


class DeviceType(str, Enum):
    """Device categories, declared in output order."""
    DESKTOP = "desktop"
    TABLET = "tablet"
    MOBILE = "mobile"

    @property
    def breakpoint(self) -> int:
        """Minimum viewport width at which this device's sizes apply."""
        return BREAKPOINTS[self]

    @property
    def label(self) -> str:
        """Single-character environment label."""
        return LABELS[self]

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


BREAKPOINTS: Dict[DeviceType, int] = {
    DeviceType.DESKTOP: 992,
    DeviceType.TABLET: 768,
    DeviceType.MOBILE: 0,
}

LABELS: Dict[DeviceType, str] = {
    DeviceType.DESKTOP: "d",
    DeviceType.TABLET: "t",
    DeviceType.MOBILE: "m",
}

DEVICE_ORDER: Tuple[DeviceType, ...] = (
    DeviceType.DESKTOP,
    DeviceType.TABLET,
    DeviceType.MOBILE,
)


class SizeState(str, Enum):
    """What the user supplied for one device category."""
    ABSENT = "absent"
    NULL = "null"
    PRESENT = "present"


class DeviceSizes(BaseModel):
    """Parsed sizes for a single device category."""
    device_type: DeviceType
    state: SizeState
    sizes: List[SizePair] = Field(default_factory=list)

    @property
    def is_null(self) -> bool:
        return self.state == SizeState.NULL

    @property
    def has_sizes(self) -> bool:
        return self.state == SizeState.PRESENT and len(self.sizes) > 0

    def json_sizes(self) -> Optional[List[List[int]]]:
        """Sizes as JSON-ready nested lists, or None for an explicit null."""
        if self.is_null:
            return None
        return [[width, height] for width, height in self.sizes]


class Variant(str, Enum):
    """Runnable prompt-and-emit flows."""
    AUTO_INSERT = "autoinsert"
    STANDARD = "standard"
    REFERENCE = "reference"


class UnknownVariantError(ValueError):
    """Raised when a variant name or launcher code is not recognised."""


class VariantProfile(BaseModel):
    """User-facing text for one variant."""
    variant: Variant
    title: str
    instructions: str
    invalid_format_message: str
    prompt_template: str = "Enter {device} sizes: "

    def prompt_for(self, device_type: DeviceType) -> str:
        return self.prompt_template.format(device=device_type.display_name)


class LaunchResult(BaseModel):
    """Outcome of running a variant in a child process."""
    variant: Variant
    command: List[str]
    exit_code: int
    started: bool = True
    error: Optional[str] = None
