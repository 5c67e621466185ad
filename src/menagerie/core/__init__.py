"""
Menagerie Core Module

The animal entity hierarchy and the shared construction counter.
"""

from .counter import InstanceCounter, animal_counter
from .entity import Animal, Mammal, Rabbit

__all__ = [
    "Animal",
    "Mammal",
    "Rabbit",
    "InstanceCounter",
    "animal_counter",
]
