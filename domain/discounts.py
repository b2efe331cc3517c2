"""
Discount strategies.

A strategy maps a cart total to a discounted total. Strategies never touch
items; callers apply the returned amount themselves. New strategies are
built from existing ones with two combinators:

- ``combine_with(other)`` applies ``self`` first and feeds the result to ``other``
- ``with_max_discount(cap)`` never takes more than ``cap`` off the total

Example:
    >>> strategy = percentage_discount(10).combine_with(flat_discount(50))
    >>> strategy.apply_discount(1400.0)
    1210.0
"""

import math
from typing import Any, Callable, Optional

from app.exceptions import InvalidArgumentError
from domain.enums import DiscountKind
from domain.models.item import validate_rate


def _validate_amount(amount: Any, field: str, label: str) -> float:
    if amount is None or not amount >= 0:
        raise InvalidArgumentError(f"{label} must be positive.", details={field: amount})
    if not math.isfinite(amount):
        raise InvalidArgumentError(
            f"{label} must be a finite number.", details={field: amount}
        )
    return float(amount)


class DiscountStrategy:
    """Base class: subclasses implement ``apply_discount``."""

    def apply_discount(self, total_amount: float) -> float:
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement apply_discount()"
        )

    def __call__(self, total_amount: float) -> float:
        return self.apply_discount(total_amount)

    def apply_discount_formatted(self, total_amount: float) -> str:
        """Discounted total rounded to two decimal places."""
        return f"{self.apply_discount(total_amount):.2f}"

    def combine_with(self, other: "DiscountStrategy") -> "DiscountStrategy":
        """Strategy computing ``other(self(total))``."""
        return CombinedDiscount(self, other)

    def with_max_discount(self, max_discount: float) -> "DiscountStrategy":
        """Strategy that applies ``self`` but never takes more than ``max_discount`` off."""
        return CappedDiscount(self, max_discount)


class NoDiscount(DiscountStrategy):
    """Identity strategy."""

    def apply_discount(self, total_amount: float) -> float:
        return total_amount

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoDiscount)

    def __hash__(self) -> int:
        return hash(NoDiscount)

    def __repr__(self) -> str:
        return "NoDiscount()"


class PercentageDiscount(DiscountStrategy):
    """
    Takes ``percentage`` percent off the total.

    There is no floor at zero: a percentage within [0, 100] cannot push a
    non-negative total below it.
    """

    def __init__(self, percentage: float):
        self._percentage = self._check(percentage)

    @staticmethod
    def _check(percentage: Any) -> float:
        try:
            return validate_rate(percentage)
        except InvalidArgumentError:
            raise InvalidArgumentError(
                "Discount percentage must be between 0 and 100.",
                details={"percentage": percentage},
            ) from None

    @property
    def percentage(self) -> float:
        return self._percentage

    @percentage.setter
    def percentage(self, value: float) -> None:
        self._percentage = self._check(value)

    def apply_discount(self, total_amount: float) -> float:
        return total_amount * (1 - self._percentage / 100)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PercentageDiscount):
            return NotImplemented
        return self._percentage == other._percentage

    __hash__ = None

    def __repr__(self) -> str:
        return f"PercentageDiscount(percentage={self._percentage!r})"


class FlatDiscount(DiscountStrategy):
    """Subtracts a fixed amount from the total, never going below zero."""

    def __init__(self, discount_amount: float):
        self._discount_amount = _validate_amount(discount_amount, "discount_amount", "Discount amount")

    @property
    def discount_amount(self) -> float:
        return self._discount_amount

    @discount_amount.setter
    def discount_amount(self, value: float) -> None:
        self._discount_amount = _validate_amount(value, "discount_amount", "Discount amount")

    def apply_discount(self, total_amount: float) -> float:
        return max(total_amount - self._discount_amount, 0.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlatDiscount):
            return NotImplemented
        return self._discount_amount == other._discount_amount

    __hash__ = None

    def __repr__(self) -> str:
        return f"FlatDiscount(discount_amount={self._discount_amount!r})"


class FunctionDiscount(DiscountStrategy):
    """Adapts a plain ``float -> float`` callable."""

    def __init__(self, func: Callable[[float], float]):
        if func is None or not callable(func):
            raise InvalidArgumentError("Discount function must be callable")
        self.func = func

    def apply_discount(self, total_amount: float) -> float:
        return self.func(total_amount)

    def __repr__(self) -> str:
        return f"FunctionDiscount(func={self.func!r})"


class CombinedDiscount(DiscountStrategy):
    """Sequential composition: ``second(first(total))``."""

    def __init__(self, first: DiscountStrategy, second: DiscountStrategy):
        if first is None or second is None:
            raise InvalidArgumentError("Cannot combine with a null strategy")
        self.first = first
        self.second = second

    def apply_discount(self, total_amount: float) -> float:
        return self.second.apply_discount(self.first.apply_discount(total_amount))

    def __repr__(self) -> str:
        return f"CombinedDiscount(first={self.first!r}, second={self.second!r})"


class CappedDiscount(DiscountStrategy):
    """Applies ``inner`` but limits the amount taken off to ``max_discount``."""

    def __init__(self, inner: DiscountStrategy, max_discount: float):
        if inner is None:
            raise InvalidArgumentError("Cannot cap a null strategy")
        self.inner = inner
        self.max_discount = _validate_amount(max_discount, "max_discount", "Maximum discount")

    def apply_discount(self, total_amount: float) -> float:
        return max(total_amount - self.max_discount, self.inner.apply_discount(total_amount))

    def __repr__(self) -> str:
        return f"CappedDiscount(inner={self.inner!r}, max_discount={self.max_discount!r})"


def no_discount() -> DiscountStrategy:
    return NoDiscount()


def percentage_discount(percentage: float) -> PercentageDiscount:
    return PercentageDiscount(percentage)


def flat_discount(amount: float) -> FlatDiscount:
    return FlatDiscount(amount)


def from_function(func: Callable[[float], float]) -> DiscountStrategy:
    return FunctionDiscount(func)


def build_strategy(
    kind: DiscountKind, value: float = 0, max_discount: Optional[float] = None
) -> DiscountStrategy:
    """
    Build a strategy from a declarative description.

    Args:
        kind: which base strategy to build
        value: percentage for PERCENTAGE, amount for FLAT, ignored for NONE
        max_discount: optional cap applied on top of the base strategy

    Returns:
        The configured DiscountStrategy

    Raises:
        InvalidArgumentError: if value or max_discount is out of range
    """
    try:
        kind = DiscountKind(kind)
    except ValueError:
        raise InvalidArgumentError(
            f"Unknown discount kind: {kind}", details={"kind": kind}
        ) from None

    if kind == DiscountKind.PERCENTAGE:
        strategy = percentage_discount(value)
    elif kind == DiscountKind.FLAT:
        strategy = flat_discount(value)
    else:
        strategy = no_discount()

    if max_discount is not None:
        strategy = strategy.with_max_discount(max_discount)
    return strategy
