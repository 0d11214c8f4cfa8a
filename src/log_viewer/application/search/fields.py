"""Application search – field-name sanitization for hit sources.

Structured log shippers emit dotted, namespaced field names
(``log.level``, ``http.response.status_code``, ``@timestamp``). Sources are
re-keyed to lowerCamelCase so callers see one schema whatever pipeline
produced the document.
"""
from __future__ import annotations

import re
from typing import Final

from log_viewer.kernel.errors import MalformedDocumentError
from log_viewer.kernel.types import JsonObject, JsonValue, is_object, json_kind

__all__ = ["sanitize_key", "sanitize_keys"]

_SEPARATORS: Final = re.compile(r"[\W_]+")


def _split_words(chunk: str) -> list[str]:
    # userAgent -> user, Agent; HTTPServer -> HTTP, Server; ip4Addr -> ip4, Addr
    words: list[str] = []
    start = 0
    last_upper: bool | None = None
    for index, char in enumerate(chunk):
        if char.isupper():
            following = chunk[index + 1 : index + 2]
            if index > start and (last_upper is False or (last_upper and following.islower())):
                words.append(chunk[start:index])
                start = index
            last_upper = True
        elif char.islower():
            last_upper = False
    if start < len(chunk):
        words.append(chunk[start:])
    return words


def sanitize_key(key: str) -> str:
    """Convert one raw field name to mixed case.

    Rules applied in order:
    1. Replace ``.`` with a space.
    2. Split on runs of non-alphanumeric characters (space, ``_``, ``-``, ``@``).
    3. Split each chunk on case transitions.
    4. Lower-case the first word, capitalise the rest, join without separators.

    Letters are classified with Unicode case rules, so ``größe`` stays one
    word and caseless scripts such as CJK are kept as they are.
    """
    words: list[str] = []
    for chunk in _SEPARATORS.split(key.replace(".", " ")):
        words.extend(_split_words(chunk))
    if not words:
        return ""
    head, *tail = words
    return head.lower() + "".join(word.capitalize() for word in tail)


def sanitize_keys(document: JsonValue) -> JsonObject:
    """Re-key the top level of *document*; values are left untouched.

    Keys come back sorted. When two raw keys sanitize to the same name the
    raw key that sorts last wins, so the result does not depend on the
    insertion order of *document*.

    Raises:
        MalformedDocumentError: *document* is not a JSON object.
    """
    if not is_object(document):
        kind = json_kind(document)
        raise MalformedDocumentError(
            f"Cannot sanitize keys of a non-object node ({kind})",
            kind=kind,
            detail={"kind": kind},
        )

    renamed: JsonObject = {}
    for raw_key in sorted(document):
        renamed[sanitize_key(raw_key)] = document[raw_key]
    return {key: renamed[key] for key in sorted(renamed)}
