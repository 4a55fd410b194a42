from datetime import datetime

from tamagotchi_api.domain.pet_rules import FEEDINGS, PLAYTIMES, SCOLDINGS, is_dead
from tamagotchi_api.models.schemas import Pet
from tamagotchi_api.models.schema_models import (
    FeedingSchema,
    PetSchema,
    PlaytimeSchema,
    ScoldingSchema,
)

EVENT_SCHEMAS = {
    FEEDINGS: FeedingSchema,
    PLAYTIMES: PlaytimeSchema,
    SCOLDINGS: ScoldingSchema,
}


class PetConverter:
    """This class is used to convert rows into the schemas sent to the client."""

    @staticmethod
    def to_pet_schema(pet: Pet, now: datetime) -> PetSchema:
        """Convert a Pet row to PetSchema, deriving is_dead at the given time

        Args:
            pet (Pet): Pet row loaded from the database
            now (datetime): The time the death rule is evaluated against

        Returns:
            PetSchema: The pet data with its current death state
        """
        return PetSchema(
            id=pet.id,
            name=pet.name,
            birthday=pet.birthday,
            hunger_level=pet.hunger_level,
            happiness_level=pet.happiness_level,
            last_interacted_with_date=pet.last_interacted_with_date,
            is_dead=is_dead(
                pet.last_interacted_with_date,
                pet.hunger_level,
                pet.happiness_level,
                now,
            ),
        )

    @staticmethod
    def to_event_schema(kind: str, event) -> FeedingSchema | PlaytimeSchema | ScoldingSchema:
        return EVENT_SCHEMAS[kind].model_validate(event)

    @staticmethod
    def to_naive_local(value: datetime) -> datetime:
        """Timestamps are stored naive in local time; drop any offset the client sent."""
        if value.tzinfo is None:
            return value
        return value.astimezone().replace(tzinfo=None)
