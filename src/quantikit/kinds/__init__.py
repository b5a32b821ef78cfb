"""
Built-in quantity kinds.

Importing this package defines every kind and attaches its ``KindInfo`` to
its quantity type (``Length.info``). ``BUILTIN_KINDS`` is the ordered tuple
the default registry is bootstrapped with.
"""

from quantikit.kinds.acceleration import ACCELERATION_INFO, Acceleration, AccelerationUnit
from quantikit.kinds.angle import ANGLE_INFO, Angle, AngleUnit
from quantikit.kinds.duration import DURATION_INFO, Duration, DurationUnit
from quantikit.kinds.length import LENGTH_INFO, Length, LengthUnit
from quantikit.kinds.mass import MASS_INFO, Mass, MassUnit
from quantikit.kinds.temperature import TEMPERATURE_INFO, Temperature, TemperatureUnit
from quantikit.kinds.turbidity import TURBIDITY_INFO, Turbidity, TurbidityUnit

BUILTIN_KINDS = (
    LENGTH_INFO,
    MASS_INFO,
    DURATION_INFO,
    TEMPERATURE_INFO,
    ACCELERATION_INFO,
    ANGLE_INFO,
    TURBIDITY_INFO,
)

__all__ = [
    "BUILTIN_KINDS",
    "Acceleration",
    "AccelerationUnit",
    "Angle",
    "AngleUnit",
    "Duration",
    "DurationUnit",
    "Length",
    "LengthUnit",
    "Mass",
    "MassUnit",
    "Temperature",
    "TemperatureUnit",
    "Turbidity",
    "TurbidityUnit",
]
