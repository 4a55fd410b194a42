from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional


class PetCreateModel(BaseModel):
    # Stats and dates sent by the client are ignored; the server sets them.
    name: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PetModel(BaseModel):
    id: int
    name: Optional[str] = None
    birthday: datetime
    hunger_level: int
    happiness_level: int
    last_interacted_with_date: datetime

    class Config:
        alias_generator = to_camel
        populate_by_name = True
