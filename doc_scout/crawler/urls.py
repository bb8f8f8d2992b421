# doc_scout/crawler/urls.py
"""
URL canonicalization for DocScout.

:func:`canonicalize` is the only place where two URLs are decided to be the
same page; everything else compares its output.
"""
from __future__ import annotations

from typing import Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

__all__ = ("canonicalize", "same_domain")


def canonicalize(raw: str, base: Optional[str] = None) -> Optional[str]:
    """
    Resolve *raw* against *base* and return its canonical form.

    Drops the fragment and trailing slashes of the path (the root ``/`` is
    kept), keeps the query and the case of host and path untouched.
    Returns ``None`` instead of raising when the result is not an absolute URL.
    """
    if not isinstance(raw, str):
        return None
    raw = raw.strip()
    if not raw:
        return None
    try:
        absolute = urljoin(base, raw) if base else raw
        parts = urlsplit(absolute)
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None

    path = parts.path.rstrip("/") or "/"
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, ""))


def same_domain(url: str, domain: str) -> bool:
    """
    True if *url* points at *domain* (case-insensitive).

    *domain* is a bare host (``learn.microsoft.com``), in which case the URL
    must not carry an explicit port, or ``host:port``, in which case the port
    has to match.
    """
    try:
        parts = urlsplit(url)
        host, port = parts.hostname, parts.port
        allowed = urlsplit("//" + domain.strip().lower())
        allowed_host, allowed_port = allowed.hostname, allowed.port
    except ValueError:
        return False
    return host is not None and host == allowed_host and port == allowed_port
