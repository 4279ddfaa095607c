"""
Style code compiler.

A style code describes the pane layout of one opening:

    code := row ('/' row)*
    row  := pane ('-' pane)*
    pane := 'A' (awning) | 'F' (fixed) | 'S' (sliding)

"A-F/S" is two rows: awning + fixed on top, one sliding pane below.

Parsing is total. Any other token (lowercase letters, longer strings, the
empty token between doubled separators) becomes an UNKNOWN pane instead of
an error, so every code yields at least one row of at least one pane.
"""

from typing import NamedTuple, Tuple

from ..models import PaneKind

ROW_SEPARATOR = "/"
PANE_SEPARATOR = "-"

PANE_TOKENS = {
    "A": PaneKind.AWNING,
    "F": PaneKind.FIXED,
    "S": PaneKind.SLIDING,
}


class ParsedStyle(NamedTuple):
    code: str
    rows: Tuple[Tuple[PaneKind, ...], ...]

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def pane_counts(self) -> Tuple[int, ...]:
        return tuple(len(row) for row in self.rows)

    @property
    def total_panes(self) -> int:
        return sum(self.pane_counts)


def pane_kind_for_token(token: str) -> PaneKind:
    if token in PANE_TOKENS:
        return PANE_TOKENS[token]
    return PaneKind.UNKNOWN


def parse_style_code(code) -> ParsedStyle:
    """Compile a style code into rows of panes. Never raises."""
    text = "" if code is None else str(code)
    rows = tuple(
        tuple(pane_kind_for_token(token) for token in row.split(PANE_SEPARATOR))
        for row in text.split(ROW_SEPARATOR)
    )
    return ParsedStyle(code=text, rows=rows)
