"""
Indentation-aware text sink used by the emitters.
"""

from laragen.core.errors import WriterStateError


class CodeWriter:
    """
    Accumulates source lines at a tracked indentation depth.

    Blank lines are written without indentation so the output carries no
    trailing whitespace.
    """

    def __init__(self, indent_unit: str = "\t") -> None:
        self.indent_unit = indent_unit
        self._depth = 0
        self._lines: list[str] = []

    @property
    def depth(self) -> int:
        """Current indentation depth."""
        return self._depth

    @property
    def lines(self) -> list[str]:
        """Lines written so far, without terminators."""
        return list(self._lines)

    def write_line(self, text: str = "") -> None:
        """Append a line at the current depth."""
        if text:
            self._lines.append(self.indent_unit * self._depth + text)
        else:
            self._lines.append("")

    def indent(self) -> None:
        """Increase the depth by one level."""
        self._depth += 1

    def outdent(self) -> None:
        """Decrease the depth by one level."""
        if self._depth == 0:
            raise WriterStateError(
                "Cannot outdent below column zero",
                details={"lines_written": len(self._lines)},
            )
        self._depth -= 1

    def get_data(self) -> str:
        """Return the accumulated text, one terminated line per write."""
        return "".join(f"{line}\n" for line in self._lines)
