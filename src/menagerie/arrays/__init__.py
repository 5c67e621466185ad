"""
Menagerie Arrays Module

Pure helpers over sequences: anagram grouping, deduplication and flattening.
"""

from .anagrams import anagram_key, group_anagrams
from .flatten import flatten
from .unique import unique_values

__all__ = [
    "anagram_key",
    "group_anagrams",
    "flatten",
    "unique_values",
]
