"""Profile snapshot consumed by the planner."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Allergy:
    """Named allergy entry from the user's profile."""

    name: str
    severity: str = "moderate"


@dataclass(frozen=True)
class ProfileSnapshot:
    """Physiological and preference data for one user."""

    age: int | None = None
    date_of_birth: date | None = None
    gender: str | None = None
    weight: float | None = None
    weight_unit: str = "kg"
    height: float | None = None
    height_unit: str = "cm"
    activity_level: str | None = None
    health_goals: tuple[str, ...] = ()
    dietary_preferences: frozenset[str] = field(default_factory=frozenset)
    allergies: tuple[Allergy, ...] = ()
    timezone: str = "UTC"

    @property
    def allergy_names(self) -> set[str]:
        """Lower-cased allergy names."""
        return {allergy.name.strip().lower() for allergy in self.allergies}
