"""Anagram grouping."""

from typing import Dict, Iterable, List


def anagram_key(word: str) -> str:
    """Sorted characters of ``word``; anagrams share the same key."""
    return "".join(sorted(word))


def group_anagrams(words: Iterable[str]) -> List[List[str]]:
    """
    Group words that are anagrams of each other.

    Groups come out in the order their first word was seen, and words keep
    their input order inside each group.

    Args:
        words: Words to group

    Returns:
        List of anagram groups
    """
    groups: Dict[str, List[str]] = {}
    for word in words:
        groups.setdefault(anagram_key(word), []).append(word)
    return list(groups.values())
