"""
URL slug generation shared by vacancies, blogs and users.
"""
import re

_WHITESPACE = re.compile(r"\s+")
_NON_WORD = re.compile(r"[^\w\-]+", re.ASCII)
_REPEATED_HYPHENS = re.compile(r"\-\-+")


def generate_slug(text: str) -> str:
    """
    Lower-case, trim, whitespace to hyphens, drop non-word characters,
    collapse repeated hyphens and strip them from both ends.

    >>> generate_slug("Desarrollador Full Stack")
    'desarrollador-full-stack'
    """
    slug = (text or "").lower().strip()
    slug = _WHITESPACE.sub("-", slug)
    slug = _NON_WORD.sub("", slug)
    slug = _REPEATED_HYPHENS.sub("-", slug)
    return slug.strip("-")
