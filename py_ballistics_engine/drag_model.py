"""Drag model implementations for ballistic projectiles.

This module provides the standard drag-retardation functions (G1, G7, G8) used by
the engines. Each model carries an immutable reference curve of drag coefficient
versus Mach number, and the drag coefficient at any Mach number is found by linear
interpolation between the two bracketing table entries.

Key Components:
    - DragDataPoint: Individual drag coefficient at specific Mach number
    - DragTable: Immutable Mach vs CD curve with clamped linear lookup
    - DragModel: Enumeration of the supported standard models

Functions:
    - make_data_points: Convert drag table data to DragDataPoint objects
    - sectional_density: Sectional density from mass and diameter
    - form_factor: Form factor of a projectile relative to a drag model

Examples:
    >>> from py_ballistics_engine import DragModel
    >>> round(DragModel.G7.retardation(0.0), 4)
    0.1198
    >>> DragModel.parse("g1") is DragModel.G1
    True
"""

# Standard library imports
import bisect
import math
from dataclasses import dataclass
from enum import Enum

# Third-party imports
from typing_extensions import List, Tuple, TypeAlias, Union

# Local imports
from py_ballistics_engine.constants import cBallisticCoefficientToMetric
from py_ballistics_engine.drag_tables import DragTablePointDictType, TableG1, TableG7, TableG8
from py_ballistics_engine.exceptions import InvalidDragModel

__all__ = (
    'DragDataPoint',
    'DragTable',
    'DragModel',
    'make_data_points',
    'sectional_density',
    'form_factor',
)


@dataclass(frozen=True)
class DragDataPoint:
    """Drag coefficient at a specific Mach number.

    Attributes:
        Mach: Velocity in Mach units (dimensionless)
        CD: Drag coefficient (dimensionless)
    """

    Mach: float  # Velocity in Mach units
    CD: float  # Drag coefficient


# Type alias for drag table data formats
DragTableDataType: TypeAlias = Union[List[DragTablePointDictType], List[DragDataPoint]]


def make_data_points(drag_table: DragTableDataType) -> List[DragDataPoint]:
    """Convert drag table from list of dictionaries to list of DragDataPoints.

    Raises:
        TypeError: If drag_table items are not DragDataPoint objects or valid
                   dictionaries with 'Mach' and 'CD' keys
    """
    try:
        return [
            point if isinstance(point, DragDataPoint) else DragDataPoint(point['Mach'], point['CD'])
            for point in drag_table
        ]
    except (KeyError, TypeError) as exc:
        raise TypeError(
            "All items in drag_table must be of type DragDataPoint or dict with 'Mach' and 'CD' keys"
        ) from exc


class DragTable:
    """Immutable reference curve of drag coefficient against Mach number.

    Lookups interpolate linearly between bracketing entries and are clamped to the
    endpoint values outside the tabulated Mach range.
    """

    __slots__ = ('_mach', '_cd')

    def __init__(self, drag_table: DragTableDataType) -> None:
        """Build the curve from table rows.

        Raises:
            ValueError: If the table has fewer than 2 rows or Mach is not strictly increasing.
        """
        points = make_data_points(drag_table)
        if len(points) < 2:
            raise ValueError('Drag table needs at least 2 entries to enable interpolation')
        for prev, cur in zip(points, points[1:]):
            if cur.Mach <= prev.Mach:
                raise ValueError("Drag table Mach values must be strictly increasing")
        self._mach: Tuple[float, ...] = tuple(p.Mach for p in points)
        self._cd: Tuple[float, ...] = tuple(p.CD for p in points)

    @property
    def mach_range(self) -> Tuple[float, float]:
        """Lowest and highest tabulated Mach numbers."""
        return self._mach[0], self._mach[-1]

    @property
    def points(self) -> Tuple[DragDataPoint, ...]:
        return tuple(DragDataPoint(m, cd) for m, cd in zip(self._mach, self._cd))

    def __len__(self) -> int:
        return len(self._mach)

    def retardation(self, mach: float) -> float:
        """Drag coefficient for the given Mach number.

        Args:
            mach: Mach number (>= 0).

        Returns:
            Linearly interpolated drag coefficient, clamped at the table extremes.
        """
        machs = self._mach
        if mach <= machs[0]:
            return self._cd[0]
        if mach >= machs[-1]:
            return self._cd[-1]
        i = bisect.bisect_right(machs, mach)
        m0, m1 = machs[i - 1], machs[i]
        cd0, cd1 = self._cd[i - 1], self._cd[i]
        return cd0 + (cd1 - cd0) * (mach - m0) / (m1 - m0)


_DRAG_TABLES = {
    'G1': DragTable(TableG1),
    'G7': DragTable(TableG7),
    'G8': DragTable(TableG8),
}


class DragModel(Enum):
    """Standard drag-retardation model.

    Each member carries its own reference curve, selected once when a projectile is defined.
    """

    G1 = 'G1'
    G7 = 'G7'
    G8 = 'G8'

    @property
    def table(self) -> DragTable:
        """Reference curve of this model."""
        return _DRAG_TABLES[self.value]

    def retardation(self, mach: float) -> float:
        """Drag coefficient of the reference projectile at `mach`."""
        return self.table.retardation(mach)

    @classmethod
    def parse(cls, token: Union[str, 'DragModel']) -> 'DragModel':
        """Resolve a drag model token, case-insensitive.

        Raises:
            InvalidDragModel: If token is not one of G1, G7, G8.
        """
        if isinstance(token, DragModel):
            return token
        if isinstance(token, str):
            try:
                return cls(token.strip().upper())
            except ValueError:
                pass
        raise InvalidDragModel(token)

    def __str__(self) -> str:
        return self.value


def sectional_density(mass: float, diameter: float) -> float:
    """Sectional density of a projectile.

    Args:
        mass: Projectile mass in kg
        diameter: Projectile diameter in m

    Returns:
        Sectional density in kg/m²
    """
    return mass / math.pow(diameter, 2)


def form_factor(mass: float, diameter: float, bc: float) -> float:
    """Form factor of a projectile relative to its drag model.

    Args:
        mass: Projectile mass in kg
        diameter: Projectile diameter in m
        bc: Ballistic coefficient in lb/in²

    Returns:
        Form factor (dimensionless): sectional density divided by ballistic coefficient.
    """
    return sectional_density(mass, diameter) / (bc * cBallisticCoefficientToMetric)
