"""Token-to-record matching.

Field-qualified tokens are dispatched to the attribute(s) they name, plain
phrases are searched in a combined default surface, and free-text tokens are
tried against every searchable surface. A record matches a query only when
every token matches (AND).
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence

from RefSearch.core.models import Reference
from RefSearch.search.normalizer import normalize, normalize_preserving_case
from RefSearch.search.scorer import score
from RefSearch.search.types import (
    FieldMatch,
    FieldName,
    MatchResult,
    Surface,
    Token,
    TokenMatch,
)
from RefSearch.search.uppercase import match_with_uppercase_sensitivity


def match_token(token: Token, record: Reference) -> TokenMatch:
    """Match a single token against a record.

    Args:
        token: Parsed query token.
        record: Record to test; never modified.

    Returns:
        A TokenMatch listing every surface that satisfied the token (empty
        when the token does not match). Free-text and phrase tokens with no
        searchable characters (e.g. "!!!") are satisfied by every record
        through its id, so they never change which records match.
    """
    if token.field is None and not normalize(token.value):
        return TokenMatch(token=token, matches=(FieldMatch(surface=Surface.ID, exact=True, value=record.id),))
    if token.field is not None:
        matches = _match_field(token, record)
    elif token.is_phrase:
        matches = _match_phrase(token.value, record)
    else:
        matches = _match_free_text(token.value, record)
    return TokenMatch(token=token, matches=tuple(matches))


def match_reference(record: Reference, tokens: Sequence[Token]) -> Optional[MatchResult]:
    """Match a record against all tokens, stopping at the first failure.

    Returns:
        A scored MatchResult, or None if any token failed. An empty token
        sequence matches nothing; callers treat a blank query as "return
        everything" before reaching the engine.
    """
    if not tokens:
        return None

    token_matches: list[TokenMatch] = []
    for token in tokens:
        token_match = match_token(token, record)
        if not token_match.matched:
            return None
        token_matches.append(token_match)

    outcome = score(token_matches)
    return MatchResult(
        record=record,
        token_matches=tuple(token_matches),
        overall_strength=outcome.overall_strength,
        score=outcome.score,
    )


def search(records: Iterable[Reference], tokens: Sequence[Token]) -> list[MatchResult]:
    """Return results for every record matching all tokens, in snapshot order."""
    results: list[MatchResult] = []
    for record in records:
        result = match_reference(record, tokens)
        if result is not None:
            results.append(result)
    return results


# --- field-qualified tokens -------------------------------------------------


def _match_field(token: Token, record: Reference) -> list[FieldMatch]:
    handler = _FIELD_HANDLERS[token.field]
    return handler(token.value, record)


def _match_author_field(value: str, record: Reference) -> list[FieldMatch]:
    query = normalize_preserving_case(value)
    names = [name for author in record.authors for name in author.name_forms()]
    return _best_of(_text_match(query, name, Surface.AUTHOR, allow_exact=True) for name in names)


def _match_title_field(value: str, record: Reference) -> list[FieldMatch]:
    if not record.title:
        return []
    match = _text_match(normalize_preserving_case(value), record.title, Surface.TITLE, allow_exact=True)
    return [match] if match is not None else []


def _match_year_field(value: str, record: Reference) -> list[FieldMatch]:
    if record.year is None:
        return []
    year = str(record.year)
    if year == value.strip():
        return [FieldMatch(surface=Surface.YEAR, exact=True, value=year)]
    return []


def _identifier_field(surface: Surface, attribute: str) -> Callable[[str, Reference], list[FieldMatch]]:
    def handler(value: str, record: Reference) -> list[FieldMatch]:
        identifier = getattr(record, attribute)
        if not identifier:
            return []
        query = value.strip().casefold()
        if query and identifier.casefold().startswith(query):
            return [FieldMatch(surface=surface, exact=True, value=identifier)]
        return []

    return handler


def _match_url_field(value: str, record: Reference) -> list[FieldMatch]:
    query = value.strip()
    for url in _urls(record):
        if url == query:
            return [FieldMatch(surface=Surface.URL, exact=True, value=url)]
    return []


def _list_field(surface: Surface, attribute: str) -> Callable[[str, Reference], list[FieldMatch]]:
    def handler(value: str, record: Reference) -> list[FieldMatch]:
        query = normalize_preserving_case(value)
        return _best_of(_text_match(query, entry, surface, allow_exact=True) for entry in getattr(record, attribute))

    return handler


_FIELD_HANDLERS: dict[FieldName, Callable[[str, Reference], list[FieldMatch]]] = {
    FieldName.AUTHOR: _match_author_field,
    FieldName.TITLE: _match_title_field,
    FieldName.YEAR: _match_year_field,
    FieldName.DOI: _identifier_field(Surface.DOI, "doi"),
    FieldName.PMID: _identifier_field(Surface.PMID, "pmid"),
    FieldName.PMCID: _identifier_field(Surface.PMCID, "pmcid"),
    FieldName.URL: _match_url_field,
    FieldName.KEYWORD: _list_field(Surface.KEYWORD, "keywords"),
    FieldName.TAG: _list_field(Surface.TAG, "tags"),
}


# --- phrases ---------------------------------------------------------------


def _match_phrase(value: str, record: Reference) -> list[FieldMatch]:
    phrase = normalize(value)
    matches: list[FieldMatch] = []
    for surface, text in _phrase_surfaces(record):
        if phrase in normalize(text):
            matches.append(FieldMatch(surface=surface, exact=False, value=text))
    return matches


def _phrase_surfaces(record: Reference) -> Iterable[tuple[Surface, str]]:
    if record.title:
        yield Surface.TITLE, record.title
    if record.abstract:
        yield Surface.ABSTRACT, record.abstract
    for author in record.authors:
        for name in author.name_forms():
            yield Surface.AUTHOR, name
    if record.container_title:
        yield Surface.CONTAINER, record.container_title


# --- free text ---------------------------------------------------------------


def _match_free_text(value: str, record: Reference) -> list[FieldMatch]:
    query = normalize_preserving_case(value)
    matches: list[FieldMatch] = []

    identifier = _identifier_match(value, record)
    if identifier is not None:
        matches.append(identifier)

    for surface, text in _text_surfaces(record):
        match = _text_match(query, text, surface, allow_exact=False)
        if match is not None:
            matches.append(match)
    return _first_per_surface(matches)


def _identifier_match(value: str, record: Reference) -> Optional[FieldMatch]:
    """Whole-value, case-insensitive identifier comparison."""
    query = value.strip().casefold()
    if not query:
        return None
    candidates: list[tuple[Surface, Optional[str]]] = [
        (Surface.ID, record.id),
        (Surface.DOI, record.doi),
        (Surface.PMID, record.pmid),
        (Surface.PMCID, record.pmcid),
        (Surface.ISBN, record.isbn),
        (Surface.YEAR, str(record.year) if record.year is not None else None),
    ]
    candidates.extend((Surface.URL, url) for url in _urls(record))
    for surface, identifier in candidates:
        if identifier and identifier.casefold() == query:
            return FieldMatch(surface=surface, exact=True, value=identifier)
    return None


def _text_surfaces(record: Reference) -> Iterable[tuple[Surface, str]]:
    if record.title:
        yield Surface.TITLE, record.title
    for author in record.authors:
        for name in author.name_forms():
            yield Surface.AUTHOR, name
    if record.abstract:
        yield Surface.ABSTRACT, record.abstract
    for keyword in record.keywords:
        yield Surface.KEYWORD, keyword
    for tag in record.tags:
        yield Surface.TAG, tag
    if record.container_title:
        yield Surface.CONTAINER, record.container_title


def _first_per_surface(matches: Sequence[FieldMatch]) -> list[FieldMatch]:
    seen: set[Surface] = set()
    unique: list[FieldMatch] = []
    for match in matches:
        if match.surface in seen:
            continue
        seen.add(match.surface)
        unique.append(match)
    return unique


# --- helpers -----------------------------------------------------------------


def _text_match(query: str, text: str, surface: Surface, *, allow_exact: bool) -> Optional[FieldMatch]:
    """Acronym-sensitive containment of a case-preserving normalized query.

    With `allow_exact`, a query equal to the whole normalized text (ignoring
    case) is reported as an exact match.
    """
    target = normalize_preserving_case(text)
    if not match_with_uppercase_sensitivity(query, target):
        return None
    exact = allow_exact and query.casefold() == target.casefold()
    return FieldMatch(surface=surface, exact=exact, value=text)


def _best_of(candidates: Iterable[Optional[FieldMatch]]) -> list[FieldMatch]:
    """Pick the first exact match, else the first match, from candidates."""
    best: Optional[FieldMatch] = None
    for match in candidates:
        if match is None:
            continue
        if match.exact:
            return [match]
        if best is None:
            best = match
    return [best] if best is not None else []


def _urls(record: Reference) -> Iterable[str]:
    if record.url:
        yield record.url
    yield from record.additional_urls
