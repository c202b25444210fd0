from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

RoleCatalog = dict[str, float]

# Role names land unquoted in the CSV export
UNSAFE_NAME_CHARS = (",", '"', "\n", "\r")

DEFAULT_ROLE_CATALOG: RoleCatalog = {
    "Server": 4.5,
    "Bartender": 4.0,
    "Host": 4.5,
    "Busser": 4.0,
    "Runner": 4.0,
    "Togo": 4.0,
    "QA": 4.0,
    "Expo": 4.0,
    "Barback": 4.0,
    "Dishwasher": 4.0,
}


@dataclass
class Config:

    # Week layout (fixed order)
    DAYS: tuple[str, ...] = ("Mon", "Tues", "Wed", "Thurs", "Fri", "Sat", "Sun")

    # Role name -> shifts covered per week by one full-time occupant
    ROLE_CATALOG: RoleCatalog = field(
        default_factory=lambda: dict(DEFAULT_ROLE_CATALOG)
    )

    # Volume multiplier, as a percentage of baseline traffic
    VOLUME_MIN: int = 25
    VOLUME_MAX: int = 200
    DEFAULT_VOLUME: int = 100

    # Persistence keys
    LEGACY_STORAGE_KEY: str = "staffingData"  # pre-volume schema
    STORAGE_KEY: str = "staffingState"

    # Where exports, charts and the CLI state file land
    OUTPUT_DIR: Path = Path("outputs")

    def validate(self) -> None:
        """
        Validate the Config object has sensible values before use.
        """
        if len(self.DAYS) != 7 or len(set(self.DAYS)) != 7:
            raise ValueError("DAYS must hold 7 distinct day names.")
        if not self.ROLE_CATALOG:
            raise ValueError("ROLE_CATALOG must contain at least one role.")
        for role, divisor in self.ROLE_CATALOG.items():
            if any(ch in role for ch in UNSAFE_NAME_CHARS):
                raise ValueError(
                    f"Role name {role!r} must not contain commas, quotes or newlines."
                )
            if not (isinstance(divisor, (int, float)) and divisor > 0):
                raise ValueError(f"Divisor for role '{role}' must be > 0.")
        if not (0 < self.VOLUME_MIN <= self.DEFAULT_VOLUME <= self.VOLUME_MAX):
            raise ValueError(
                "Require 0 < VOLUME_MIN <= DEFAULT_VOLUME <= VOLUME_MAX."
            )
        if self.LEGACY_STORAGE_KEY == self.STORAGE_KEY:
            raise ValueError("LEGACY_STORAGE_KEY and STORAGE_KEY must differ.")

    @property
    def roles(self) -> list[str]:
        return list(self.ROLE_CATALOG)

    def divisor(self, role: str) -> float:
        try:
            return float(self.ROLE_CATALOG[role])
        except KeyError:
            raise ValueError(f"Unknown role '{role}'.") from None


def catalog_from_json(path: str | Path) -> RoleCatalog:
    """
    Load a role catalog from a JSON file on disk.

    The file may contain either a mapping of role name to divisor, a mapping of
    role name to an object with a `divisor` key, or an object with a top-level
    `roles` key holding one of those. Role order in the file is preserved.
    """
    file_path = Path(path).expanduser()

    if file_path.suffix.lower() != ".json":
        raise ValueError("catalog_from_json expects a path to a .json file.")
    if not file_path.exists():
        raise FileNotFoundError(f"Role catalog file not found: {file_path}")

    try:
        data = json.loads(file_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {file_path}") from exc

    if not isinstance(data, Mapping):
        raise TypeError("Role catalog JSON must be an object.")
    entries = data.get("roles", data)
    if not isinstance(entries, Mapping):
        raise TypeError("'roles' must be an object of role name -> divisor.")

    catalog: RoleCatalog = {}
    for role, raw in entries.items():
        value: Optional[Any] = raw.get("divisor") if isinstance(raw, Mapping) else raw
        catalog[str(role)] = _to_divisor(value, str(role))

    if not catalog:
        raise ValueError(f"Role catalog in {file_path} is empty.")
    return catalog


def _to_divisor(value: Any, role: str) -> float:
    if value is None or isinstance(value, bool):
        raise ValueError(f"Role '{role}' is missing a divisor.")
    try:
        divisor = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid divisor for '{role}': {value!r}") from exc
    if divisor <= 0:
        raise ValueError(f"Divisor for role '{role}' must be > 0.")
    return divisor


@dataclass(frozen=True)
class Location:
    """A restaurant the plan is prepared for. Only used to label exports."""

    id: str
    name: str
    code: str


LOCATIONS: tuple[Location, ...] = (
    Location("AH", "Auburn Hills", "C00605"),
    Location("SH", "Shelby", "C00734"),
    Location("OM", "Oakland Mall", "C00316"),
    Location("RH", "Rochester Hills", "C00195"),
    Location("GA", "Gratiot Ave", "C00954"),
    Location("FG", "Fort Gratiot", "C01107"),
    Location("WA", "Warren", "C01142"),
)


def find_location(location_id: str) -> Location:
    for loc in LOCATIONS:
        if loc.id == location_id:
            return loc
    known = ", ".join(loc.id for loc in LOCATIONS)
    raise ValueError(f"Unknown location '{location_id}'. Expected one of: {known}")


cfg = Config()
