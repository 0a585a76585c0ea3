"""Unit conversions and rounding helpers."""

from decimal import ROUND_HALF_UP, Decimal

KG_PER_LB = 0.45359237
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    The float is read through its shortest decimal repr, so ``76.5`` is a tie
    even if the binary value sits a hair off it.
    """
    return int(Decimal(repr(float(value))).quantize(Decimal(1), ROUND_HALF_UP))


def lb_to_kg(pounds: float) -> float:
    """Convert pounds to kilograms."""
    return pounds * KG_PER_LB


def kg_to_lb(kilograms: float) -> float:
    """Convert kilograms to pounds."""
    return kilograms / KG_PER_LB


def inches_to_cm(inches: float) -> float:
    """Convert inches to centimeters."""
    return inches * CM_PER_INCH


def cm_to_inches(centimeters: float) -> float:
    """Convert centimeters to inches."""
    return centimeters / CM_PER_INCH


def feet_inches_to_cm(feet: float, inches: float = 0.0) -> float:
    """Convert a feet-and-inches height to centimeters."""
    return inches_to_cm(feet * INCHES_PER_FOOT + inches)
