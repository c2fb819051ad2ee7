"""
Size-map assembly policies.

Each policy turns the three device results into the JSON object expected by
the slot renderer. Policies are pure functions of their input.
"""

from typing import Any, Callable, Dict, Iterable, List

from sizemap_gen.models import DEVICE_ORDER, DeviceSizes, UnknownVariantError, Variant


SizeMap = Dict[str, Any]


def _ordered(results: Iterable[DeviceSizes]) -> List[DeviceSizes]:
    by_device = {result.device_type: result for result in results}
    return [by_device[device_type] for device_type in DEVICE_ORDER if device_type in by_device]


def needs_size_config(results: Iterable[DeviceSizes]) -> bool:
    """True unless every device is blank or ``null``."""
    return any(result.has_sizes for result in results)


def build_breakpoint_size_map(results: Iterable[DeviceSizes]) -> SizeMap:
    """
    List-of-breakpoints policy.

    Devices with sizes or an explicit ``null`` each contribute
    ``[[breakpoint], sizes]``; blank devices are left out.
    """
    size_map = []
    for result in _ordered(results):
        if result.is_null or result.has_sizes:
            size_map.append([[result.device_type.breakpoint], result.json_sizes()])
    return {"sizeMap": size_map}


def build_reference_size_map(results: Iterable[DeviceSizes]) -> SizeMap:
    """
    Full breakpoint table: one entry per device, blanks as ``[]``.
    """
    return {
        "sizeMap": [
            [[result.device_type.breakpoint], result.json_sizes()]
            for result in _ordered(results)
        ]
    }


def build_extension_size_map(results: Iterable[DeviceSizes]) -> SizeMap:
    """
    First-plus-extensions policy.

    The first device with sizes becomes the primary ``sizes``/``envs`` pair,
    later ones go to ``envExt``. Blank and ``null`` devices are skipped.
    """
    size_map: SizeMap = {}
    env_ext = []

    for result in _ordered(results):
        if not result.has_sizes:
            continue

        if "sizes" not in size_map:
            size_map["sizes"] = result.json_sizes()
            size_map["envs"] = result.device_type.label
        else:
            env_ext.append({"sizes": result.json_sizes(), "envs": result.device_type.label})

    if env_ext:
        size_map["envExt"] = env_ext

    return size_map


POLICIES: Dict[Variant, Callable[[Iterable[DeviceSizes]], SizeMap]] = {
    Variant.AUTO_INSERT: build_extension_size_map,
    Variant.STANDARD: build_breakpoint_size_map,
    Variant.REFERENCE: build_reference_size_map,
}


def assemble(variant: Variant, results: Iterable[DeviceSizes]) -> SizeMap:
    """Build the size map for a variant."""
    try:
        policy = POLICIES[Variant(variant)]
    except ValueError:
        raise UnknownVariantError(f"Unknown variant: {variant}") from None
    return policy(list(results))
