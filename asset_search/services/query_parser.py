"""Free-text query parsing."""

import re

from ..models.search import ExactPhrase, MatchAll, ParsedQuery, TermQuery

_EXACT_RE = re.compile(r'"(.+)"')


def parse_query(query: str) -> ParsedQuery:
    """Turn a raw search string into a structured text predicate.

    ``"red car"`` (quotes spanning the whole query) is an exact phrase.
    Anything else is split on whitespace: ``-term`` tokens exclude, the rest include.
    A blank query places no text constraint at all.
    """
    normalized = (query or "").lower().strip()
    if not normalized:
        return MatchAll()

    exact = _EXACT_RE.fullmatch(normalized)
    if exact:
        return ExactPhrase(phrase=exact.group(1))

    include: list[str] = []
    exclude: list[str] = []
    for token in normalized.split():
        if token.startswith("-"):
            term = token[1:]
            if term:
                exclude.append(term)
        else:
            include.append(token)
    return TermQuery(include=include, exclude=exclude)
