"""
Menagerie - Coursework Exercises

A three-level animal class hierarchy with private attributes and a shared
instance counter, plus small array and geometry helpers.
"""

from .core import Animal, Mammal, Rabbit, InstanceCounter, animal_counter
from .arrays import anagram_key, group_anagrams, unique_values, flatten
from .geometry import PI, area_of_circle, area_of_rectangle, area_of_cylinder
from .config import ApplicationConfig, Environment, LoggingConfig, get_config, set_config
from .errors import MenagerieError, ConfigurationError

__version__ = "0.1.0"

__all__ = [
    # Entity hierarchy
    'Animal',
    'Mammal',
    'Rabbit',
    'InstanceCounter',
    'animal_counter',

    # Array helpers
    'anagram_key',
    'group_anagrams',
    'unique_values',
    'flatten',

    # Geometry
    'PI',
    'area_of_circle',
    'area_of_rectangle',
    'area_of_cylinder',

    # Configuration and errors
    'ApplicationConfig',
    'Environment',
    'LoggingConfig',
    'get_config',
    'set_config',
    'MenagerieError',
    'ConfigurationError',
]
