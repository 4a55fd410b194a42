import logging
from typing import List, Union

from fastapi import APIRouter, HTTPException, Request, Response, status

from tamagotchi_api.domain.pet_rules import DEAD_PET_MESSAGE
from tamagotchi_api.models.dc_models import PetCreateModel, PetModel
from tamagotchi_api.models.schema_models import (
    FeedingSchema,
    PetSchema,
    PlaytimeSchema,
    ScoldingSchema,
)
from tamagotchi_api.services import pet_db
from tamagotchi_api.services.errors import PetIdMismatchError, PetNotFoundError

pets_router = APIRouter(prefix="/pets", tags=["pets"])


def not_found(e: PetNotFoundError) -> HTTPException:
    logging.warning(str(e))
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


async def record_interaction(interaction, pet_id: int):
    try:
        result = await interaction(pet_id)
    except PetNotFoundError as e:
        raise not_found(e)
    if result.dead:
        return DEAD_PET_MESSAGE
    return result.event


class PetAPI:
    @staticmethod
    @pets_router.get("", response_model=List[PetSchema])
    async def get_pets():
        return await pet_db.list_pets()

    @staticmethod
    @pets_router.get("/{pet_id}", response_model=PetSchema, name="get_pet")
    async def get_pet(pet_id: int):
        try:
            return await pet_db.read_pet(pet_id)
        except PetNotFoundError as e:
            raise not_found(e)

    @staticmethod
    @pets_router.put("/{pet_id}", response_model=PetSchema)
    async def put_pet(pet_id: int, pet: PetModel):
        try:
            return await pet_db.replace_pet(pet_id, pet)
        except PetIdMismatchError as e:
            logging.warning(str(e))
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        except PetNotFoundError as e:
            raise not_found(e)

    @staticmethod
    @pets_router.post("", response_model=PetSchema, status_code=status.HTTP_201_CREATED)
    async def post_pet(pet: PetCreateModel, request: Request, response: Response):
        created = await pet_db.create_pet(pet)
        response.headers["Location"] = str(request.url_for("get_pet", pet_id=created.id))
        return created

    @staticmethod
    @pets_router.delete("/{pet_id}", response_model=PetSchema)
    async def delete_pet(pet_id: int):
        try:
            return await pet_db.delete_pet(pet_id)
        except PetNotFoundError as e:
            raise not_found(e)


class InteractionAPI:
    @staticmethod
    @pets_router.post("/{pet_id}/feedings", response_model=Union[FeedingSchema, str])
    async def create_feeding(pet_id: int):
        return await record_interaction(pet_db.feed_pet, pet_id)

    @staticmethod
    @pets_router.post("/{pet_id}/playtimes", response_model=Union[PlaytimeSchema, str])
    async def create_playtime(pet_id: int):
        return await record_interaction(pet_db.play_with_pet, pet_id)

    @staticmethod
    @pets_router.post("/{pet_id}/scoldings", response_model=Union[ScoldingSchema, str])
    async def create_scolding(pet_id: int):
        return await record_interaction(pet_db.scold_pet, pet_id)
