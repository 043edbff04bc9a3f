"""Errors raised by the diet-plan generation pipeline."""


class DietPlanError(Exception):
    """Base error for diet-plan generation."""


class InvalidProfile(DietPlanError):
    """The profile lacks usable physiological input."""


class ProfileNotFound(DietPlanError):
    """No profile exists for the requested user."""


class ProviderUnavailable(DietPlanError):
    """A generative backend could not be reached or refused the call."""

    def __init__(self, provider: str, reason: str) -> None:
        super().__init__(f"{provider}: {reason}")
        self.provider = provider
        self.reason = reason


class InvalidAIOutput(DietPlanError):
    """A backend response could not be accepted as a plan or food list."""


class FoodCatalogExhausted(DietPlanError):
    """The catalog could not supply a single non-empty meal."""


class DuplicateFoodError(DietPlanError):
    """A catalog insert collided with existing food names."""
