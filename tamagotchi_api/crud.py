"""Persistence helpers for pets and their interaction events.

None of these commit: the service layer owns session/transaction boundaries.
"""

from datetime import datetime
from typing import List
import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from tamagotchi_api.db import engine
from tamagotchi_api.models.schemas import Base, EVENT_TABLES, Pet


class ReadData:
    @staticmethod
    async def read_pet(pet_id: int, session: AsyncSession) -> Pet | None:
        """Read a pet by id

        Args:
            pet_id (int): To identify the pet

        Returns:
            Pet | None: The pet row, or None if it does not exist
        """
        stmt = select(Pet).where(Pet.id == pet_id)
        result = await session.execute(stmt)
        return result.scalars().first()

    @staticmethod
    async def read_pets(session: AsyncSession) -> List[Pet]:
        """Read all pets ordered by id"""
        stmt = select(Pet).order_by(Pet.id)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def pet_exists(pet_id: int, session: AsyncSession) -> bool:
        stmt = select(Pet.id).where(Pet.id == pet_id)
        result = await session.execute(stmt)
        return result.scalars().first() is not None


class CreateData:
    @staticmethod
    async def create_table() -> None:
        """Create tables if not exists"""
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @staticmethod
    async def add_pet(pet: Pet, session: AsyncSession) -> Pet:
        """Stage a new pet and flush it so the database assigns its id

        Args:
            pet (Pet): New pet row with its defaults already set
        """
        session.add(pet)
        await session.flush()
        return pet

    @staticmethod
    async def add_event(kind: str, pet_id: int, when: datetime, session: AsyncSession):
        """Stage a new interaction event for the pet

        Args:
            kind (str): "feedings", "playtimes" or "scoldings"
            pet_id (int): Pet the event belongs to
            when (datetime): Time of the interaction

        Returns:
            Feeding | Playtime | Scolding: The staged event row
        """
        event = EVENT_TABLES[kind](when=when, pet_id=pet_id)
        session.add(event)
        await session.flush()
        return event


class UpdateData:
    @staticmethod
    async def replace_pet(pet_id: int, fields: dict, session: AsyncSession) -> None:
        """Overwrite every column of the pet with a single conditional UPDATE

        Args:
            pet_id (int): To identify the pet
            fields (dict): New value for each column, keyed by attribute name

        Raises:
            StaleDataError: No row matched, so the pet is gone or was replaced under us
        """
        stmt = (
            update(Pet)
            .where(Pet.id == pet_id)
            .values(**fields, version_id=Pet.version_id + 1)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        if result.rowcount != 1:
            logging.debug(f"UPDATE pets matched {result.rowcount} rows for pet {pet_id}")
            raise StaleDataError(
                f"UPDATE statement on table 'pets' expected to update 1 row(s); "
                f"{result.rowcount} were matched."
            )


class DeleteData:
    @staticmethod
    async def drop_table() -> None:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    @staticmethod
    async def delete_pet(pet: Pet, session: AsyncSession) -> None:
        """Delete a pet; its events are removed by the ON DELETE CASCADE foreign keys"""
        await session.delete(pet)
        await session.flush()
