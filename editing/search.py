from __future__ import annotations

from typing import Iterable, List


def find_matching_lines(lines: Iterable[str], search_text: str) -> List[int]:
    """1-based numbers of the lines containing ``search_text``, ignoring case.

    Both sides are lowercased, so multi-character folds (``"ß"`` to ``"ss"``) do
    not match.
    """
    needle = search_text.lower()
    return [number for number, line in enumerate(lines, start=1) if needle in line.lower()]
