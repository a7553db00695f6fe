"""Helpers that turn raw city names into URL-safe query fragments."""

from urllib.parse import quote

TRIM_CHARS = " \t"


def trim(raw: str) -> str:
    """Strip leading and trailing spaces and tabs (other whitespace is kept)."""
    return raw.strip(TRIM_CHARS)


def url_encode(raw: str) -> str:
    """Percent-encode everything outside A-Z, a-z, 0-9 and ``-_.~``.

    Non-ASCII characters are encoded byte by byte from their UTF-8 form,
    always with uppercase hex digits. Undecodable input bytes, carried as
    surrogate escapes, come out as their original byte (e.g. ``%FF``).
    """
    return quote(raw, safe="", errors="surrogateescape")


def sanitize(raw: str) -> str:
    """Trim a raw city name and encode it for use in a query string.

    Args:
        raw: City name as typed by the user.

    Returns:
        The encoded fragment, e.g. ``"Rio%20de%20Janeiro"``.
    """
    return url_encode(trim(raw))
