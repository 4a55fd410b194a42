from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime


class PetSchema(BaseModel):
    id: int
    name: Optional[str] = None
    birthday: datetime
    hunger_level: int
    happiness_level: int
    last_interacted_with_date: datetime
    is_dead: bool

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class FeedingSchema(BaseModel):
    id: int
    when: datetime
    pet_id: int

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class PlaytimeSchema(BaseModel):
    id: int
    when: datetime
    pet_id: int

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class ScoldingSchema(BaseModel):
    id: int
    when: datetime
    pet_id: int

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
