"""
Menagerie Core - Animal Hierarchy

Three-tier entity hierarchy: ``Animal -> Mammal -> Rabbit``.

Every tier keeps its state in pydantic private attributes and exposes it
only through accessors. Construction always runs parent-first, and every
successful construction bumps the shared ``animal_counter`` exactly once.
"""

import logging
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, PrivateAttr

from .counter import animal_counter

logger = logging.getLogger(__name__)


class Animal(BaseModel):
    """Base entity with a private name and a class-wide instance count."""
    model_config = ConfigDict(extra="forbid")

    _name: str = PrivateAttr()

    def __init__(self, name: str):
        super().__init__()
        self._name = name
        self._count_creation()

    def _count_creation(self) -> None:
        total = animal_counter.increment(type(self).__name__)
        logger.debug(f"Created {type(self).__name__} {self._name!r} (total animals: {total})")

    # Pydantic's validation and construct paths skip __init__ and would yield
    # uncounted, partially initialized entities.
    @classmethod
    def model_construct(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} must be created through its constructor")

    @classmethod
    def model_validate(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} must be created through its constructor")

    @classmethod
    def model_validate_json(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} must be created through its constructor")

    @classmethod
    def model_validate_strings(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} must be created through its constructor")

    def __copy__(self):
        clone = super().__copy__()
        clone._count_creation()
        return clone

    def __deepcopy__(self, memo=None):
        clone = super().__deepcopy__(memo)
        clone._count_creation()
        return clone

    @staticmethod
    def total_count() -> int:
        """Number of entities constructed across the whole hierarchy."""
        return animal_counter.total

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    def say_hello(self) -> str:
        return "Hello, I am an animal"

    def summary(self) -> Dict[str, Any]:
        """
        Get the public view of this entity.

        Subclasses extend the parent's summary with their own attributes.

        Returns:
            Dict with ``kind`` and every readable attribute
        """
        return {"kind": type(self).__name__, "name": self._name}

    def __repr_args__(self):
        for key, value in self.summary().items():
            if key != "kind":
                yield key, value


class Mammal(Animal):
    """Animal that may or may not walk on land."""

    _walks: bool = PrivateAttr(default=True)

    def __init__(self, name: str, walks: bool = True):
        super().__init__(name)
        self._walks = walks

    def walks_on_land(self) -> bool:
        return self._walks

    @property
    def walks(self) -> bool:
        return self._walks

    @walks.setter
    def walks(self, value: bool) -> None:
        self._walks = value

    def summary(self) -> Dict[str, Any]:
        summary = super().summary()
        summary["walks_on_land"] = self._walks
        return summary


class Rabbit(Mammal):
    """
    Mammal with a jump count.

    The jump count is fixed at construction: ``jump_count`` has no setter,
    so assigning it raises ``AttributeError``.
    """

    _jumps: int = PrivateAttr(default=2)

    def __init__(self, name: str, walks: bool = True, jumps: int = 2):
        super().__init__(name, walks)
        self._jumps = jumps

    @property
    def jump_count(self) -> int:
        return self._jumps

    def summary(self) -> Dict[str, Any]:
        summary = super().summary()
        summary["jump_count"] = self._jumps
        return summary
