"""Split text into lines that keep their terminators"""

from pathlib import Path


def split_lines(text: str) -> list[str]:
    """Split after every newline; a final line without one is kept as-is. '' -> []."""
    lines = text.split("\n")
    result = [line + "\n" for line in lines[:-1]]
    if lines[-1]:
        result.append(lines[-1])
    return result


def read_lines(path: str | Path) -> list[str]:
    """Read a UTF-8 text file and split it with split_lines. Raises OSError on I/O failure."""
    with open(path, encoding="utf-8", newline="") as f:
        return split_lines(f.read())
