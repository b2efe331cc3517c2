"""
Domain enums for SmartCart application.
"""

import enum


class DiscountKind(str, enum.Enum):
    """Base discount strategies that can be described declaratively"""

    NONE = "none"
    PERCENTAGE = "percentage"
    FLAT = "flat"
