"""User profile supplied to the menu generator."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Gender(str, Enum):
    """Gender used for nutritional estimates."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(str, Enum):
    """Physical activity levels."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class MeasurementSystem(str, Enum):
    """Units for weight and height."""

    METRIC = "METRIC"
    IMPERIAL = "IMPERIAL"


class Profile(BaseModel):
    """Immutable profile of the person the menu is generated for.

    Attributes are snake_case in Python and camelCase on the wire, which is
    also the form embedded into prompts.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    age: int = Field(gt=0)
    weight: float = Field(ge=0)
    height: float = Field(ge=0)
    gender: Gender
    activity_level: ActivityLevel
    weight_goal: float = Field(ge=0)
    weight_loss_per_week: float = Field(ge=0)
    daily_calories: int = Field(gt=0)
    allergies: tuple[str, ...] = ()
    regimes: tuple[str, ...] = ()
    measurement_system: MeasurementSystem = MeasurementSystem.METRIC

    @field_validator("allergies", "regimes")
    @classmethod
    def _dedupe(cls, values: tuple[str, ...]) -> tuple[str, ...]:
        """Drop blanks and duplicates, keeping first-seen order."""
        cleaned = (value.strip() for value in values)
        return tuple(dict.fromkeys(value for value in cleaned if value))


SAMPLE_PROFILE = Profile(
    age=30,
    weight=70,
    height=175,
    gender=Gender.MALE,
    activity_level=ActivityLevel.MODERATE,
    weight_goal=68,
    weight_loss_per_week=0.5,
    daily_calories=2000,
    allergies=("milk",),
    regimes=(),
    measurement_system=MeasurementSystem.METRIC,
)


def load_profile(path: Path) -> Profile:
    """Load a camelCase JSON profile from disk."""
    payload = json.loads(path.read_text(encoding="utf-8"))
    return Profile.model_validate(payload)
