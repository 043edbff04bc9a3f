"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from diet_planner.domain.profile import Allergy, ProfileSnapshot
from diet_planner.services.diet_plans import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile lookups."""

    client: Client

    def get_profile(self, user_id: UUID) -> ProfileSnapshot | None:
        """Return the profile for a user."""
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> ProfileSnapshot:
    dob_raw = row.get("date_of_birth")
    date_of_birth = (
        date.fromisoformat(dob_raw[:10]) if isinstance(dob_raw, str) and dob_raw else None
    )
    age_raw = row.get("age")
    weight_raw = row.get("weight")
    height_raw = row.get("height")
    return ProfileSnapshot(
        age=int(age_raw) if age_raw is not None else None,
        date_of_birth=date_of_birth,
        gender=row.get("gender"),
        weight=float(weight_raw) if weight_raw is not None else None,
        weight_unit=str(row.get("weight_unit") or "kg"),
        height=float(height_raw) if height_raw is not None else None,
        height_unit=str(row.get("height_unit") or "cm"),
        activity_level=row.get("activity_level"),
        health_goals=tuple(row.get("health_goals") or ()),
        dietary_preferences=frozenset(row.get("dietary_preferences") or ()),
        allergies=tuple(_parse_allergy(entry) for entry in row.get("allergies") or ()),
        timezone=str(row.get("timezone") or "UTC"),
    )


def _parse_allergy(entry: object) -> Allergy:
    if isinstance(entry, str):
        return Allergy(name=entry)
    if isinstance(entry, dict):
        return Allergy(
            name=str(entry.get("name", "")),
            severity=str(entry.get("severity") or "moderate"),
        )
    raise ValueError(f"Unsupported allergy entry: {entry!r}")
