"""A single line of viewable content, measured in grapheme clusters."""

import grapheme


def _visible(cluster: str) -> str:
    """Replace a control cluster with its one-column Control Pictures glyph."""
    code = ord(cluster[0])
    if code < 0x20:
        # Covers CR LF too, which segments as a single cluster
        return chr(0x2400 + code)
    if code == 0x7f:
        return "\u2421"
    return cluster


class Line:
    """Immutable view over one line of text.

    Horizontal positions are counted in user-perceived characters
    (grapheme clusters), so a flag emoji or an ``e`` followed by a
    combining accent each occupy one column. Control characters are
    drawn as single-column placeholders (a tab shows as ``␉``) so the
    drawn text stays in step with the cursor.
    """

    __slots__ = ("_text", "_clusters")

    def __init__(self, text: str = ""):
        self._text = text
        self._clusters: tuple[str, ...] = tuple(_visible(c) for c in grapheme.graphemes(text))

    @property
    def text(self) -> str:
        """The original line text."""
        return self._text

    def length(self) -> int:
        """Number of grapheme clusters in the line."""
        return len(self._clusters)

    def __len__(self) -> int:
        return len(self._clusters)

    def is_empty(self) -> bool:
        return not self._clusters

    def render(self, start: int, end: int) -> str:
        """Return the clusters at indices ``[start, end)`` joined together.

        ``end`` is capped to the line length and ``start`` to ``end``, so
        out-of-range requests yield a shorter (possibly empty) string
        instead of an error.
        """
        end = max(0, min(end, len(self._clusters)))
        start = max(0, min(start, end))
        return "".join(self._clusters[start:end])

    def __repr__(self):
        return f"Line({self._text!r})"
