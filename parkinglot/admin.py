"""Parking lot configuration form: rates, capacities and custom vehicle types."""

from __future__ import annotations

from dataclasses import dataclass, field

PRICE_SEPARATOR = " - NPR "
RATE_SUFFIX = "/hr"


class InputError(ValueError):
    """Raised when the form holds input that cannot be accepted."""


class NoSelectionError(LookupError):
    """Raised when an action needs a selected custom rate and none is chosen."""


def format_number(value: float) -> str:
    """Format a number the way the form displays it (up to six significant digits)."""
    return f"{value:g}"


def _to_number(text: str) -> float:
    cleaned = text.strip()
    if not cleaned or "_" in cleaned:
        return 0.0
    try:
        return float(cleaned)
    except ValueError:
        return 0.0


@dataclass(frozen=True)
class VehicleRate:
    """Hourly rate and number of spaces for one vehicle kind."""

    rate: float = 0.0
    capacity: int = 0


@dataclass(frozen=True)
class ParkingLot:
    """A saved parking lot configuration."""

    name: str
    location: str
    car: VehicleRate = field(default_factory=VehicleRate)
    bike: VehicleRate = field(default_factory=VehicleRate)
    bus: VehicleRate = field(default_factory=VehicleRate)
    minivan: VehicleRate = field(default_factory=VehicleRate)
    handicapped_spots: int = 0

    def summary(self) -> str:
        """Return the confirmation text shown once the lot has been saved."""
        lines = [
            f"Parking lot '{self.name}' saved successfully!",
            f"Location: {self.location}",
        ]
        for label, entry in (
            ("Car", self.car),
            ("Bike", self.bike),
            ("Bus", self.bus),
            ("Minivan", self.minivan),
        ):
            lines.append(
                f"{label} Rate: NPR {format_number(entry.rate)}{RATE_SUFFIX} "
                f"(Capacity: {entry.capacity})"
            )
        lines.append(f"Handicapped Spots: {self.handicapped_spots}")
        return "\n".join(lines)


@dataclass(frozen=True)
class CustomRate:
    """A rate for a vehicle type that is not one of the built-in kinds."""

    vehicle_type: str
    rate: float
    capacity: int = 0

    def __str__(self) -> str:
        return (
            f"{self.vehicle_type}{PRICE_SEPARATOR}{format_number(self.rate)}"
            f"{RATE_SUFFIX} (Capacity: {self.capacity})"
        )


def parse_custom_rate(text: str) -> tuple[str, float] | None:
    """Read the vehicle type and rate back out of a custom rate list entry.

    Returns None when the text does not have the list entry's shape. A rate
    that cannot be read as a number comes back as 0.0.
    """
    parts = text.split(PRICE_SEPARATOR)
    if len(parts) < 2:
        return None
    rate_text = parts[1].split(RATE_SUFFIX)[0]
    return parts[0], _to_number(rate_text)


@dataclass
class AdminForm:
    """The administrator's form for configuring a parking lot."""

    name: str = ""
    location: str = ""
    car: VehicleRate = field(default_factory=VehicleRate)
    bike: VehicleRate = field(default_factory=VehicleRate)
    bus: VehicleRate = field(default_factory=VehicleRate)
    minivan: VehicleRate = field(default_factory=VehicleRate)
    handicapped_spots: int = 0
    custom_vehicle_name: str = ""
    custom_rate: float = 0.0
    custom_capacity: int = 0
    custom_vehicles: list[str] = field(default_factory=list)

    def validate(self) -> None:
        """Raise InputError unless the lot has a name and a location."""
        if not self.name.strip():
            raise InputError("Please enter a parking lot name.")
        if not self.location.strip():
            raise InputError("Please enter a location.")

    def save(self) -> ParkingLot:
        """Validate the form, return the lot it describes and clear the form."""
        self.validate()
        lot = ParkingLot(
            name=self.name,
            location=self.location,
            car=self.car,
            bike=self.bike,
            bus=self.bus,
            minivan=self.minivan,
            handicapped_spots=self.handicapped_spots,
        )
        self.clear()
        return lot

    def add_custom_rate(self) -> str:
        """Add the custom rate inputs to the list and return the new entry."""
        vehicle_type = self.custom_vehicle_name.strip()
        if not vehicle_type:
            raise InputError("Please enter a vehicle type.")
        if self.custom_rate <= 0:
            raise InputError("Please enter a valid rate.")
        entry = str(CustomRate(vehicle_type, self.custom_rate, self.custom_capacity))
        self.custom_vehicles.append(entry)
        self._reset_custom_inputs()
        return entry

    def edit_custom_rate(self, row: int | None) -> str:
        """Move the entry at ``row`` back into the custom rate inputs."""
        entry = self._take(row, "edit")
        parsed = parse_custom_rate(entry)
        if parsed is not None:
            self.custom_vehicle_name, self.custom_rate = parsed
        return entry

    def delete_custom_rate(self, row: int | None) -> str:
        """Remove and return the entry at ``row``."""
        return self._take(row, "delete")

    def clear(self) -> None:
        """Reset every field of the form."""
        self.name = ""
        self.location = ""
        self.car = VehicleRate()
        self.bike = VehicleRate()
        self.bus = VehicleRate()
        self.minivan = VehicleRate()
        self.handicapped_spots = 0
        self._reset_custom_inputs()
        self.custom_vehicles.clear()

    def _reset_custom_inputs(self) -> None:
        self.custom_vehicle_name = ""
        self.custom_rate = 0.0
        self.custom_capacity = 0

    def _take(self, row: int | None, action: str) -> str:
        if row is None or not 0 <= row < len(self.custom_vehicles):
            raise NoSelectionError(f"Please select an item to {action}.")
        return self.custom_vehicles.pop(row)