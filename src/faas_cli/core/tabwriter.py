"""Elastic tab stop alignment for tab-separated text.

Text is split into lines and each line into tab-terminated cells. A column
block is a run of consecutive lines that all have a tab-terminated cell in
that column; every cell of the block is padded to the widest one plus
`padding`. The final cell of each line is not tab-terminated and is never
padded, so a line without tabs (a blank line, for example) ends every block
above it.
"""


def align_tabs(text: str, *, padding: int = 1, padchar: str = " ") -> str:
    """Align tab-separated text into columns.

    Args:
        text: Lines of tab-separated cells
        padding: Spaces added after the widest cell of each column block
        padchar: Character used for padding

    Returns:
        The aligned text, with the same line breaks as the input

    Example:
        >>> align_tabs("a\\tbb\\tc\\nccc\\td\\te\\n")
        'a   bb c\\nccc d  e\\n'
    """
    lines = text.split("\n")
    rows = [line.split("\t") for line in lines]
    widths = [[0] * (len(row) - 1) for row in rows]
    _fill_widths(rows, widths, 0, len(rows), 0, padding)

    out_lines: list[str] = []
    for row, row_widths in zip(rows, widths, strict=True):
        cells = [cell.ljust(width, padchar) for cell, width in zip(row, row_widths, strict=False)]
        cells.append(row[-1])
        out_lines.append("".join(cells))
    return "\n".join(out_lines)


def _fill_widths(
    rows: list[list[str]],
    widths: list[list[int]],
    start: int,
    end: int,
    column: int,
    padding: int,
) -> None:
    """Compute widths of `column` for rows[start:end], then recurse rightwards."""
    line = start
    while line < end:
        if len(rows[line]) - 1 <= column:
            line += 1
            continue

        block_start = line
        width = 0
        while line < end and len(rows[line]) - 1 > column:
            width = max(width, len(rows[line][column]) + padding)
            line += 1

        for index in range(block_start, line):
            widths[index][column] = width
        _fill_widths(rows, widths, block_start, line, column + 1, padding)
