"""Weighted edit distance that treats case changes and keyboard neighbours as cheap."""

from __future__ import annotations

_QWERTY = (
    "qwertyuiop",
    " asdfghjkl",
    "  zxcvbnm ",
)

_KEYBOARD_MAP: dict[str, tuple[int, int]] = {
    ch: (row, col)
    for row, keys in enumerate(_QWERTY)
    for col, ch in enumerate(keys)
    if ch != " "
}

_UNKNOWN_KEY_DISTANCE = 1000
_NO_TRANSPOSITION = 10000.0


def keyboard_distance(ch1: str, ch2: str) -> int:
    """Manhattan distance between two keys on a QWERTY layout, 1000 if either is unknown."""
    pos1 = _KEYBOARD_MAP.get(ch1)
    pos2 = _KEYBOARD_MAP.get(ch2)
    if pos1 is None or pos2 is None:
        return _UNKNOWN_KEY_DISTANCE
    return abs(pos1[0] - pos2[0]) + abs(pos1[1] - pos2[1])


def _substitution_cost(letter1: str, letter2: str) -> float:
    if letter1 == letter2:
        return 0.0
    lower1, lower2 = letter1.lower(), letter2.lower()
    if lower1 == lower2:
        return 0.25
    if keyboard_distance(lower1, lower2) == 1:
        return 0.5
    return 1.0


def distance(str1: str, str2: str) -> float:
    """Edit distance with cheap case and adjacent-key substitutions and transpositions."""
    rows = len(str1) + 1
    cols = len(str2) + 1
    mat = [[0.0] * cols for _ in range(rows)]
    for i in range(rows):
        mat[i][0] = float(i)
    for j in range(cols):
        mat[0][j] = float(j)

    for i, letter1 in enumerate(str1, start=1):
        for j, letter2 in enumerate(str2, start=1):
            delete = mat[i - 1][j] + 1.0
            insert = mat[i][j - 1] + 1.0
            sub = mat[i - 1][j - 1] + _substitution_cost(letter1, letter2)
            if i > 1 and j > 1 and letter1 == str2[j - 2] and str1[i - 2] == letter2:
                transpose = mat[i - 2][j - 2] + 1.0
            else:
                transpose = _NO_TRANSPOSITION
            mat[i][j] = min(delete, transpose, insert, sub)

    return mat[-1][-1]


def distance_no_case(str1: str, str2: str) -> float:
    """Edit distance after lower-casing both strings."""
    return distance(str1.lower(), str2.lower())