"""Input validation for slot and strip declarations."""

from __future__ import annotations

KINDS = ("exact", "initial", "relative", "remainder")


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_bound(value) -> bool:
    """Numeric, or None meaning unbounded."""
    return value is None or _is_number(value)


def validate_slots(slots: list[dict]) -> list[str]:
    """Validate slot declarations. Returns list of error messages (empty = valid).

    Checks:
    - kind is one of exact, initial, relative, remainder
    - exact/initial have numeric points; relative has fraction in [0, 1]
    - at_least / at_most are numeric (at_most may be null) and ordered
    - range is [min, max] with min <= max, and is not mixed with
      at_least / at_most
    """
    errors: list[str] = []

    if not isinstance(slots, list):
        return [f"slots must be a list, got {type(slots).__name__}"]

    for i, slot in enumerate(slots):
        if not isinstance(slot, dict):
            errors.append(f"Slot {i}: expected an object, got {slot!r}")
            continue

        kind = slot.get("kind")
        if kind not in KINDS:
            errors.append(
                f"Slot {i}: invalid kind {kind!r} "
                f"(must be one of {', '.join(KINDS)})"
            )
            continue

        if kind in ("exact", "initial"):
            if not _is_number(slot.get("points")):
                errors.append(f"Slot {i}: {kind} needs numeric 'points'")

        if kind == "relative":
            fraction = slot.get("fraction")
            if not _is_number(fraction):
                errors.append(f"Slot {i}: relative needs numeric 'fraction'")
            elif not (0.0 <= fraction <= 1.0):
                errors.append(
                    f"Slot {i}: fraction {fraction} outside [0, 1]"
                )

        errors.extend(_validate_bounds(i, slot))

    return errors


def _validate_bounds(i: int, slot: dict) -> list[str]:
    errors: list[str] = []

    if "range" in slot:
        if "at_least" in slot or "at_most" in slot:
            errors.append(
                f"Slot {i}: 'range' cannot be combined with "
                f"'at_least' or 'at_most'"
            )
        pair = slot["range"]
        if (
            not isinstance(pair, list)
            or len(pair) != 2
            or not _is_number(pair[0])
            or not _is_bound(pair[1])
        ):
            errors.append(
                f"Slot {i}: expected range [min, max], got {pair!r}"
            )
        elif pair[1] is not None and pair[0] > pair[1]:
            errors.append(
                f"Slot {i}: range min {pair[0]} above max {pair[1]}"
            )
        return errors

    at_least = slot.get("at_least")
    at_most = slot.get("at_most")
    if "at_least" in slot and not _is_number(at_least):
        errors.append(f"Slot {i}: 'at_least' must be a number")
        at_least = None
    if "at_most" in slot and not _is_bound(at_most):
        errors.append(f"Slot {i}: 'at_most' must be a number or null")
        at_most = None
    if at_least is not None and at_most is not None and at_least > at_most:
        errors.append(
            f"Slot {i}: at_least {at_least} above at_most {at_most}"
        )
    return errors


def validate_strip(data: dict) -> list[str]:
    """Validate a strip declaration: optional id, spacing >= 0, and slots."""
    if not isinstance(data, dict):
        return [f"strip must be an object, got {type(data).__name__}"]

    errors: list[str] = []

    spacing = data.get("spacing", 0)
    if not _is_number(spacing):
        errors.append(f"spacing must be a number, got {spacing!r}")
    elif spacing < 0:
        errors.append(f"spacing must be >= 0, got {spacing}")

    if "slots" not in data:
        errors.append("missing 'slots'")
    else:
        errors.extend(validate_slots(data["slots"]))

    return errors
