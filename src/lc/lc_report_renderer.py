"""Plain-text rendering of LC reports against their source."""

import bisect
from typing import Dict, Iterable, List, Tuple

from lc.lc_report import LCEmphasis, LCReport, LCReportLabel


class LCSourceMap:
    """Maps UTF-8 byte offsets in a source string to 1-indexed lines and character columns."""

    def __init__(self, source: str):
        self.source = source
        self._data = source.encode("utf-8")
        self._line_starts = [0]
        for i, byte in enumerate(self._data):
            if byte == 0x0A:
                self._line_starts.append(i + 1)

    def line_column(self, offset: int) -> Tuple[int, int]:
        """
        Convert a byte offset to a line and column.

        Offsets past the end (such as the end-of-input sentinel) land just after
        the last character of the last line.

        Args:
            offset: Byte offset into the source

        Returns:
            Tuple of (line, column), both 1-indexed; the column counts characters
        """
        offset = max(0, min(offset, len(self._data)))
        index = bisect.bisect_right(self._line_starts, offset) - 1
        start = self._line_starts[index]
        column = len(self._data[start:offset].decode("utf-8", errors="replace")) + 1
        return index + 1, column

    def line_text(self, line: int) -> str:
        """Return the text of a 1-indexed line without its line terminator."""
        start = self._line_starts[line - 1]
        if line < len(self._line_starts):
            end = self._line_starts[line] - 1

        else:
            end = len(self._data)

        return self._data[start:end].decode("utf-8", errors="replace").rstrip("\r")

    def line_end_offset(self, line: int) -> int:
        """Byte offset of the end of a 1-indexed line's text."""
        return self._line_starts[line - 1] + len(self.line_text(line).encode("utf-8"))


class LCReportRenderer:
    """
    Renders reports as text in the style:

        Error: Unclosed delimiter (
         --> 1:5
          |
        1 | (a b
          | - Unclosed delimiter (
          |     ^ Must be closed before this end of file

    Primary labels are underlined with '^', secondary ones with '-'.
    """

    _MARKERS = {
        LCEmphasis.PRIMARY: "^",
        LCEmphasis.SECONDARY: "-",
    }

    def __init__(self, tab_width: int = 4):
        """
        Initialize the renderer.

        Args:
            tab_width: Number of spaces a tab in the source is displayed as
        """
        self.tab_width = tab_width

    def render(self, report: LCReport, source: str) -> str:
        """
        Render one report against the source it refers to.

        Args:
            report: The report to render
            source: The original source text the report's spans point into

        Returns:
            The rendered report, without a trailing newline
        """
        source_map = LCSourceMap(source)
        line, column = source_map.line_column(report.offset)

        by_line: Dict[int, List[Tuple[int, int, LCReportLabel]]] = {}
        for label in report.labels:
            label_line, start_column = source_map.line_column(label.span.start)
            end_offset = min(label.span.end, source_map.line_end_offset(label_line))
            __, end_column = source_map.line_column(end_offset)
            width = max(1, end_column - start_column)
            by_line.setdefault(label_line, []).append((start_column, width, label))

        gutter = len(str(max(list(by_line) + [line])))
        blank = " " * gutter

        parts = [
            f"{report.severity.value}: {report.message}",
            f"{blank}--> {line}:{column}",
            f"{blank} |",
        ]

        for label_line in sorted(by_line):
            text = source_map.line_text(label_line)
            parts.append(f"{label_line:>{gutter}} | {self._expand(text)}".rstrip())

            for start_column, width, label in sorted(by_line[label_line], key=lambda item: item[0]):
                padding = len(self._expand(text[:start_column - 1]))
                if start_column - 1 > len(text):
                    padding += start_column - 1 - len(text)

                marker = self._MARKERS[label.emphasis] * width
                parts.append(f"{blank} | {' ' * padding}{marker} {label.message}")

        return "\n".join(parts)

    def render_all(self, reports: Iterable[LCReport], source: str) -> str:
        """Render several reports, in order, separated by blank lines."""
        return "\n\n".join(self.render(report, source) for report in reports)

    def _expand(self, text: str) -> str:
        return text.replace("\t", " " * self.tab_width)
