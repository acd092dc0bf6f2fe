"""Grammar of the pattern-layout template language.

Purpose
-------
Compile a template such as ``"%d{ABSOLUTE} %-5p %c{2} - %m%n"`` into an
explicit token list once, so layouts replay tokens per event instead of
re-scanning the template.

Contents
--------
* :class:`Literal` and :class:`Directive` tokens.
* :func:`compile_pattern` – cached template compiler.

System Role
-----------
Pure domain logic. The conversion semantics (what ``%c`` or ``%d`` renders)
live in :mod:`lib_log_facade.adapters.layouts`; this module only knows the
shape ``% [padding] [.truncation] char [{argument}]``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Union

_TOKEN_RE = re.compile(
    r"%(?P<padding>-?\d+)?(?:\.(?P<truncation>\d+))?(?P<conversion>.)(?:\{(?P<argument>[^}]*)\})?"
    r"|(?P<text>[^%]+)"
    r"|(?P<stray>%)",
    re.DOTALL,
)


@dataclass(frozen=True, slots=True)
class Literal:
    """Run of template text copied verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class Directive:
    """Pre-parsed conversion directive.

    Attributes
    ----------
    conversion:
        Conversion character following the modifiers.
    padding:
        Field width; negative values left-justify. ``None`` when absent.
    truncation:
        Maximum number of leading characters kept. ``None`` when absent.
    argument:
        Text between braces, ``None`` when absent or empty.
    source:
        Matched template text, rendered as-is for unknown conversions.
    """

    conversion: str
    padding: int | None = None
    truncation: int | None = None
    argument: str | None = None
    source: str = ""

    def fit(self, text: str) -> str:
        """Apply truncation, then padding, to a rendered field.

        Examples
        --------
        >>> Directive("p", padding=-5).fit("INFO")
        'INFO '
        >>> Directive("p", padding=5, truncation=2).fit("INFO")
        '   IN'
        """

        if self.truncation is not None:
            text = text[: self.truncation]
        if self.padding:
            width = abs(self.padding)
            text = text.ljust(width) if self.padding < 0 else text.rjust(width)
        return text


Token = Union[Literal, Directive]


@lru_cache(maxsize=256)
def compile_pattern(template: str) -> tuple[Token, ...]:
    """Split ``template`` into literal runs and directives.

    Every character of the template belongs to exactly one token; a lone
    ``%`` at the end is kept as literal text.

    Examples
    --------
    >>> compile_pattern("%-5p %c{2}")
    (Directive(conversion='p', padding=-5, truncation=None, argument=None, source='%-5p'), Literal(text=' '), Directive(conversion='c', padding=None, truncation=None, argument='2', source='%c{2}'))
    """

    tokens: list[Token] = []
    for match in _TOKEN_RE.finditer(template):
        if match.group("text") is not None:
            tokens.append(Literal(match.group("text")))
        elif match.group("stray") is not None:
            tokens.append(Literal("%"))
        else:
            padding = match.group("padding")
            truncation = match.group("truncation")
            tokens.append(
                Directive(
                    conversion=match.group("conversion"),
                    padding=int(padding) if padding is not None else None,
                    truncation=int(truncation) if truncation is not None else None,
                    argument=match.group("argument") or None,
                    source=match.group(0),
                )
            )
    return tuple(tokens)


__all__ = ["Directive", "Literal", "Token", "compile_pattern"]
