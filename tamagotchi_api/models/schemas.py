from sqlalchemy import ForeignKey
from sqlalchemy.orm import DeclarativeBase, relationship
from sqlalchemy.schema import Column
from sqlalchemy.types import Integer, String, DateTime
from datetime import datetime

from tamagotchi_api.domain.pet_rules import FEEDINGS, PLAYTIMES, SCOLDINGS


class Base(DeclarativeBase):
    pass


class Pet(Base):
    __tablename__ = "pets"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=True)
    birthday = Column(DateTime, default=datetime.now, nullable=False)
    hunger_level = Column(Integer, default=0, nullable=False)
    happiness_level = Column(Integer, default=0, nullable=False)
    last_interacted_with_date = Column(DateTime, default=datetime.now, nullable=False)
    # Optimistic concurrency token, bumped on every UPDATE.
    version_id = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version_id}

    feedings = relationship(
        "Feeding",
        back_populates="pet",
        cascade="all, delete",
        passive_deletes=True,
    )
    playtimes = relationship(
        "Playtime",
        back_populates="pet",
        cascade="all, delete",
        passive_deletes=True,
    )
    scoldings = relationship(
        "Scolding",
        back_populates="pet",
        cascade="all, delete",
        passive_deletes=True,
    )


class Feeding(Base):
    __tablename__ = "feedings"
    id = Column(Integer, primary_key=True, autoincrement=True)
    when = Column(DateTime, nullable=False)
    pet_id = Column(Integer, ForeignKey("pets.id", ondelete="CASCADE"), nullable=False)

    pet = relationship("Pet", back_populates="feedings")


class Playtime(Base):
    __tablename__ = "playtimes"
    id = Column(Integer, primary_key=True, autoincrement=True)
    when = Column(DateTime, nullable=False)
    pet_id = Column(Integer, ForeignKey("pets.id", ondelete="CASCADE"), nullable=False)

    pet = relationship("Pet", back_populates="playtimes")


class Scolding(Base):
    __tablename__ = "scoldings"
    id = Column(Integer, primary_key=True, autoincrement=True)
    when = Column(DateTime, nullable=False)
    pet_id = Column(Integer, ForeignKey("pets.id", ondelete="CASCADE"), nullable=False)

    pet = relationship("Pet", back_populates="scoldings")


# Interaction kind -> event table
EVENT_TABLES = {
    FEEDINGS: Feeding,
    PLAYTIMES: Playtime,
    SCOLDINGS: Scolding,
}
