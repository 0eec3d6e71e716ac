"""
Ingredient query sanitizing and parsing.

Users type queries like "+eggs, -onions, flour". Before a query leaves the
browser it is sanitized: surrounding whitespace stripped, every character
outside [a-zA-Z+,-] removed, then stripped again. Sanitizing never rejects
input, it only drops characters.

The sanitized form is also the inclusion/exclusion syntax understood by the
directory: "+x" requires an ingredient, "-x" excludes it, a bare term is a
plain ingredient match.
"""

import re
from dataclasses import dataclass, field
from typing import List

INVALID_QUERY_CHARS = re.compile(r"[^a-zA-Z+,\-]")


def sanitize_query(raw: str) -> str:
    """
    Sanitize a raw user query.

    Idempotent: sanitize_query(sanitize_query(s)) == sanitize_query(s).

    Examples:
        >>> sanitize_query("  +Eggs, -Onions!! ")
        '+Eggs,-Onions'
    """
    if not raw:
        return ""
    return INVALID_QUERY_CHARS.sub("", raw.strip()).strip()


@dataclass
class IngredientQuery:
    """Parsed form of a sanitized ingredient query (terms lowercased)."""
    required: List[str] = field(default_factory=list)
    excluded: List[str] = field(default_factory=list)
    terms: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.required or self.excluded or self.terms)

    def matches(self, ingredients: str) -> bool:
        """
        Check a comma-joined ingredient string against the query.

        Required terms must all be present, excluded terms must all be absent,
        and when only plain terms are given at least one of them must match.
        """
        available = [part.strip().lower() for part in ingredients.split(",") if part.strip()]

        def has(term: str) -> bool:
            return any(term in ingredient for ingredient in available)

        if any(not has(term) for term in self.required):
            return False
        if any(has(term) for term in self.excluded):
            return False
        if self.terms and not self.required:
            return any(has(term) for term in self.terms)
        return True


def parse_ingredient_query(query: str) -> IngredientQuery:
    """
    Split a query into required, excluded and plain terms.

    The query is sanitized first, so raw input is accepted too.
    """
    parsed = IngredientQuery()
    for token in sanitize_query(query).split(","):
        token = token.strip().lower()
        if not token:
            continue
        if token.startswith("+"):
            term = token.lstrip("+-")
            if term:
                parsed.required.append(term)
        elif token.startswith("-"):
            term = token.lstrip("+-")
            if term:
                parsed.excluded.append(term)
        else:
            parsed.terms.append(token)
    return parsed
