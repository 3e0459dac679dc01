"""Query tokenizer.

Turns a raw query string into free-text, phrase and field-qualified tokens.
Malformed input never raises: unmatched quotes and unknown field prefixes
degrade to literal text, empty values are dropped.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from RefSearch.search.types import FieldName, ParsedQuery, Token

_QUOTE = '"'


class _Step(NamedTuple):
    token: Optional[Token]
    next_index: int


class _Quoted(NamedTuple):
    # value is None for unmatched or empty quotes; next_index == start means unmatched
    value: Optional[str]
    next_index: int


def tokenize(query: str) -> ParsedQuery:
    """Parse a query string into tokens.

    Args:
        query: Raw user query.

    Returns:
        The parsed query; tokens keep their original casing.
    """
    tokens: list[Token] = []
    i = 0
    while i < len(query):
        if query[i].isspace():
            i += 1
            continue
        step = _next_token(query, i)
        if step.token is not None:
            tokens.append(step.token)
        i = step.next_index
    return ParsedQuery(original=query, tokens=tuple(tokens))


def _next_token(query: str, start: int) -> _Step:
    field_step = _try_field(query, start)
    if field_step is not None:
        return field_step
    if query[start] == _QUOTE:
        return _quoted_token(query, start)
    return _literal_token(query, start)


def _try_field(query: str, start: int) -> Optional[_Step]:
    """Parse `field:value` at `start`, or return None when it is not one."""
    colon = query.find(":", start)
    if colon == -1:
        return None
    name = query[start:colon]
    if _QUOTE in name or any(ch.isspace() for ch in name):
        return None
    field = FieldName.parse(name)
    if field is None:
        return None

    value_start = colon + 1
    if value_start >= len(query) or query[value_start].isspace():
        return _Step(None, value_start)

    if query[value_start] == _QUOTE:
        quoted = _read_quoted(query, value_start)
        if quoted.next_index == value_start:
            # Unterminated phrase: the whole clause becomes literal text.
            return _literal_token(query, start, include_quotes=True)
        if quoted.value is None:
            return _Step(None, quoted.next_index)
        return _Step(
            Token(raw=query[start:quoted.next_index], value=quoted.value, field=field, is_phrase=True),
            quoted.next_index,
        )

    end = _word_end(query, value_start)
    return _Step(
        Token(raw=query[start:end], value=query[value_start:end], field=field, is_phrase=False),
        end,
    )


def _quoted_token(query: str, start: int) -> _Step:
    quoted = _read_quoted(query, start)
    if quoted.next_index == start:
        return _literal_token(query, start, include_quotes=True)
    if quoted.value is None:
        return _Step(None, quoted.next_index)
    return _Step(
        Token(raw=query[start:quoted.next_index], value=quoted.value, is_phrase=True),
        quoted.next_index,
    )


def _literal_token(query: str, start: int, *, include_quotes: bool = False) -> _Step:
    end = _word_end(query, start, include_quotes=include_quotes)
    text = query[start:end]
    return _Step(Token(raw=text, value=text), end)


def _read_quoted(query: str, start: int) -> _Quoted:
    """Read a quoted run starting at the opening quote."""
    close = query.find(_QUOTE, start + 1)
    if close == -1:
        return _Quoted(None, start)
    value = query[start + 1:close]
    if not value.strip():
        return _Quoted(None, close + 1)
    return _Quoted(value, close + 1)


def _word_end(query: str, start: int, *, include_quotes: bool = False) -> int:
    """Index just past the word at `start`; words stop at whitespace and, unless
    `include_quotes`, at a quote character."""
    i = start
    while i < len(query) and not query[i].isspace():
        if not include_quotes and query[i] == _QUOTE and i > start:
            break
        i += 1
    return i
