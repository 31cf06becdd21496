"""
Tolerance tiers for comparing matrices.

Defines how close two float64 grids must be to count as equal:
- EXACT: bitwise-equal values (what `==` uses)
- FP64: machine-precision agreement, for results reached by a
  different but equivalent summation order
- FP64_LOOSE: for results that went through a longer chain of operations

Used by Matrix.allclose() and by the test suite.
"""

from dataclasses import dataclass

from densematrix.core.exceptions import ValidationError


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Identical float64 values',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, equal up to summation order',
)

FP64_LOOSE = ToleranceTier(
    rtol=1e-6,
    atol=1e-9,
    name='fp64_loose',
    description='Double precision after chained operations',
)

TIERS = {tier.name: tier for tier in (EXACT, FP64, FP64_LOOSE)}


def select_tolerance(tolerance: ToleranceTier | str) -> ToleranceTier:
    """Resolve a tier given either the tier itself or its name."""
    if isinstance(tolerance, ToleranceTier):
        return tolerance
    try:
        return TIERS[tolerance]
    except (KeyError, TypeError) as e:
        raise ValidationError(
            f"Unknown tolerance: {tolerance!r}. Options: {sorted(TIERS)}"
        ) from e
