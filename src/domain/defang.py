"""
Scheme defanger - Ordered rule table for malforming URI scheme tokens.

The goal of defanging is to malform a scheme such that a URI using it
will not open if clicked, while keeping enough information that the
original can be recovered by looking it up in the scheme registry.

Rules (first match wins)
========================

1. reject        length < 2             -> InvalidScheme
2. http          "http" / "https"       -> marker at 1, 2 (hxxp, hxxps)
3. reserved      contains "-", "+", "." -> each run wrapped in [ ]
4. length-3      3 characters           -> marker at 1
5. length-2      2 characters           -> marker at 1
6. length-4      4 characters           -> marker at 2
7. default       anything longer        -> marker at 1, 2

Brackets are never legal in a scheme, so rule 3 always yields an invalid
token. Marker substitution only usually does; the registry verifier
catches the cases where it produces a real scheme name.

The length-4 rule marks position 2 rather than 1 because marking the
second letter would collapse icap and imap into the same string.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from .exceptions import InvalidScheme

MARKER = "x"

# Characters allowed in a scheme besides [a-z0-9]
RESERVED_SCHEME_CHARS = ("-", "+", ".")

_RESERVED_RUN = re.compile(f"[{re.escape(''.join(RESERVED_SCHEME_CHARS))}]+")


@dataclass(frozen=True)
class DefangResult:
    """A scheme paired with its defanged rendering."""

    original: str
    defanged: str


@dataclass(frozen=True)
class DefangRule:
    """One guard/transform entry of the rule table."""

    name: str
    matches: Callable[[str], bool]
    transform: Callable[[str], str]


def mark_positions(scheme: str, positions: tuple[int, ...]) -> str:
    """
    Replace the characters at the given positions with the marker.

    Out-of-range positions are ignored, e.g.
    mark_positions("hello", (1, 2)) == "hxxlo".
    """
    chars = list(scheme)
    for pos in positions:
        if 0 <= pos < len(chars):
            chars[pos] = MARKER
    return "".join(chars)


def bracket_reserved_runs(scheme: str) -> str:
    """Wrap every maximal run of reserved characters in brackets."""
    return _RESERVED_RUN.sub(lambda match: f"[{match.group(0)}]", scheme)


def _reject(scheme: str) -> str:
    raise InvalidScheme(f"Cannot defang scheme {scheme!r}: at least 2 characters required")


def _marker_at(*positions: int) -> Callable[[str], str]:
    return lambda scheme: mark_positions(scheme, positions)


DEFANG_RULES: tuple[DefangRule, ...] = (
    DefangRule("reject", lambda s: len(s) < 2, _reject),
    DefangRule("http", lambda s: s in ("http", "https"), _marker_at(1, 2)),
    DefangRule("reserved", lambda s: _RESERVED_RUN.search(s) is not None, bracket_reserved_runs),
    DefangRule("length-3", lambda s: len(s) == 3, _marker_at(1)),
    DefangRule("length-2", lambda s: len(s) == 2, _marker_at(1)),
    DefangRule("length-4", lambda s: len(s) == 4, _marker_at(2)),
    DefangRule("default", lambda s: True, _marker_at(1, 2)),
)


def matching_rule(scheme: str) -> DefangRule:
    """Return the first rule whose guard accepts the scheme; "default" accepts all."""
    return next(rule for rule in DEFANG_RULES if rule.matches(scheme))


def defang(scheme: str) -> str:
    """
    Defang a URI scheme token.

    Offsets are fixed, so a scheme that already holds the marker at every
    marked position comes back unchanged (hxxp, hxxps, axc). The registry
    verifier reports such schemes as colliding with themselves.

    Args:
        scheme: Lowercase scheme token, e.g. "https"

    Returns:
        Defanged scheme, e.g. "hxxps"

    Raises:
        InvalidScheme: If the scheme has fewer than 2 characters
    """
    return matching_rule(scheme).transform(scheme)


def defang_result(scheme: str) -> DefangResult:
    """Defang a scheme and keep the original alongside."""
    return DefangResult(original=scheme, defanged=defang(scheme))
