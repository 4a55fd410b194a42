"""DB service layer for pet use cases.

- Routers should not touch DB sessions directly; they call this module.
- This layer owns session/transaction boundaries.
- Conflicts are never retried: a stale write is re-checked for existence and
  reported as not-found or as a fatal conflict.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, NoReturn, Optional

from sqlalchemy.orm.exc import StaleDataError

from tamagotchi_api.converter import PetConverter
from tamagotchi_api.crud import CreateData, DeleteData, ReadData, UpdateData
from tamagotchi_api.db import Session
from tamagotchi_api.domain.pet_rules import (
    FEEDINGS,
    PLAYTIMES,
    SCOLDINGS,
    apply_interaction,
    get_interaction,
    is_dead,
)
from tamagotchi_api.models.dc_models import PetCreateModel, PetModel
from tamagotchi_api.models.schema_models import (
    FeedingSchema,
    PetSchema,
    PlaytimeSchema,
    ScoldingSchema,
)
from tamagotchi_api.models.schemas import Pet
from tamagotchi_api.services.errors import (
    ConcurrencyConflictError,
    PetIdMismatchError,
    PetNotFoundError,
)


@dataclass
class InteractionResult:
    """Outcome of feeding, playing with or scolding a pet.

    Exactly one of `dead` and `event` is meaningful: a dead pet produces no event.
    """

    kind: str
    dead: bool = False
    event: Optional[FeedingSchema | PlaytimeSchema | ScoldingSchema] = None


async def _resolve_stale_write(pet_id: int, error: StaleDataError) -> NoReturn:
    async with Session() as session:
        exists = await ReadData.pet_exists(pet_id, session)
    if not exists:
        logging.warning(f"Pet {pet_id} was deleted before the write completed")
        raise PetNotFoundError(pet_id) from error
    logging.error(f"Concurrent modification of pet {pet_id}: {error}")
    raise ConcurrencyConflictError(pet_id) from error


async def list_pets() -> List[PetSchema]:
    now = datetime.now()
    async with Session() as session:
        pets = await ReadData.read_pets(session)
        return [PetConverter.to_pet_schema(pet, now) for pet in pets]


async def read_pet(pet_id: int) -> PetSchema:
    async with Session() as session:
        pet = await ReadData.read_pet(pet_id, session)
        if pet is None:
            raise PetNotFoundError(pet_id)
        return PetConverter.to_pet_schema(pet, datetime.now())


async def create_pet(pet: PetCreateModel) -> PetSchema:
    """Create a pet with the server-controlled defaults

    Args:
        pet (PetCreateModel): Client data; only the name is used

    Returns:
        PetSchema: The stored pet with its assigned id
    """
    now = datetime.now()
    new_pet = Pet(
        name=pet.name,
        birthday=now,
        hunger_level=0,
        happiness_level=0,
        last_interacted_with_date=now,
    )
    async with Session() as session:
        async with session.begin():
            await CreateData.add_pet(new_pet, session)
    logging.info(f"Created pet {new_pet.id} ({new_pet.name})")
    return PetConverter.to_pet_schema(new_pet, now)


async def replace_pet(pet_id: int, pet: PetModel) -> PetSchema:
    """Overwrite every field of an existing pet

    Args:
        pet_id (int): Id taken from the request path
        pet (PetModel): Full pet representation from the request body

    Raises:
        PetIdMismatchError: The body id differs from the path id (checked before any DB access)
        PetNotFoundError: The pet does not exist at write time
        ConcurrencyConflictError: The write went stale but the pet still exists
    """
    if pet.id != pet_id:
        raise PetIdMismatchError(pet_id, pet.id)

    fields = {
        "name": pet.name,
        "birthday": PetConverter.to_naive_local(pet.birthday),
        "hunger_level": pet.hunger_level,
        "happiness_level": pet.happiness_level,
        "last_interacted_with_date": PetConverter.to_naive_local(
            pet.last_interacted_with_date
        ),
    }
    try:
        async with Session() as session:
            async with session.begin():
                await UpdateData.replace_pet(pet_id, fields, session)
                updated = await ReadData.read_pet(pet_id, session)
    except StaleDataError as e:
        await _resolve_stale_write(pet_id, e)

    logging.info(f"Replaced pet {pet_id}")
    return PetConverter.to_pet_schema(updated, datetime.now())


async def delete_pet(pet_id: int) -> PetSchema:
    """Delete a pet and return its state from just before the deletion"""
    try:
        async with Session() as session:
            async with session.begin():
                pet = await ReadData.read_pet(pet_id, session)
                if pet is None:
                    raise PetNotFoundError(pet_id)
                deleted = PetConverter.to_pet_schema(pet, datetime.now())
                await DeleteData.delete_pet(pet, session)
    except StaleDataError as e:
        await _resolve_stale_write(pet_id, e)

    logging.info(f"Deleted pet {pet_id}")
    return deleted


async def interact(pet_id: int, kind: str) -> InteractionResult:
    """Apply one interaction to a pet and record it as an event.

    The stat change and the new event row are committed in one transaction.
    A dead pet is left untouched and no event is recorded.

    Args:
        pet_id (int): To identify the pet
        kind (str): "feedings", "playtimes" or "scoldings"

    Raises:
        PetNotFoundError: The pet does not exist
        ConcurrencyConflictError: The pet changed between read and write
    """
    interaction = get_interaction(kind)
    now = datetime.now()
    try:
        async with Session() as session:
            async with session.begin():
                pet = await ReadData.read_pet(pet_id, session)
                if pet is None:
                    raise PetNotFoundError(pet_id)

                if is_dead(
                    pet.last_interacted_with_date,
                    pet.hunger_level,
                    pet.happiness_level,
                    now,
                ):
                    logging.info(f"Pet {pet_id} is dead, ignoring {kind}")
                    return InteractionResult(kind=kind, dead=True)

                pet.hunger_level, pet.happiness_level = apply_interaction(
                    pet.hunger_level, pet.happiness_level, interaction
                )
                pet.last_interacted_with_date = now
                event = await CreateData.add_event(kind, pet.id, now, session)
    except StaleDataError as e:
        await _resolve_stale_write(pet_id, e)

    logging.info(
        f"Pet {pet_id} {kind}: hunger={pet.hunger_level}, happiness={pet.happiness_level}"
    )
    return InteractionResult(kind=kind, event=PetConverter.to_event_schema(kind, event))


async def feed_pet(pet_id: int) -> InteractionResult:
    return await interact(pet_id, FEEDINGS)


async def play_with_pet(pet_id: int) -> InteractionResult:
    return await interact(pet_id, PLAYTIMES)


async def scold_pet(pet_id: int) -> InteractionResult:
    return await interact(pet_id, SCOLDINGS)
