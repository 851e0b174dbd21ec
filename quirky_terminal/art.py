"""The two pieces of ASCII art and the side-by-side composer."""

from __future__ import annotations

from typing import List

NIGHT_OUT = r"""
|\_____/|     ////\
|/// \\\|    /// \\\
 |/O O\|     |/o o\|
 d  ^ .b     C  )  D    "A Night Out On The Town"
  \\m//      | \_/ |
   \_/        \___/
 __ooo__    _/<|_|>\_
/_     _\  / |/\_/\| \
| \_v_/ | |    |\|    |
|| _/ _/\\| |  |\|  | |
||)    ( \| |  |\|  | |
||      \ | \\ |\|  | |
||  --  |  (())\_/  | |
((      |   |___|___|_|
 |______|   |   Y   |))
  |-||-|    |   |   |
  | || |    |   |   |
  | || |    |   |   |
  | || |    |___|___|prs
 /u\||/u\   /qp| |qp\
(_/\||/\_) (___/ \___)"""[1:]

THIRTY_YEARS_LATER = r"""
    -(|)-      /\\ \
   /\|||/\    /     \
   |-O_O-|    |-o-o-|
   d  ^  b    C  V  D        "30 Years Later"
   O\-=-/O    | ___ |
     \_/       \___/
   __| |__   _/<|_|>\_
  /  \_/  \ / |/\_/\| \
 /  o   o  |    |\|    |
|/ __o__ \| |   |\|  | |
|\ o   o /| |   |\|  | |
||)=====( \ \\  |\|  | |
|| o   o \ (())\_/__| |
((   o   |  |   |   |_|
 | o   o |  |   Y   |))\
 |   o   |  |   |   | ||
 | o   o |  |   |   | ||
 |_______|  |   |   | ||
prs|_|_|    |___|___| ||
    /X|X\    /qp| |qp\ ||
   (__|__)  (___/ \___)||"""[1:]


def combine_art(left: str, right: str, gap: int = 4) -> str:
    """Place ``right`` beside ``left``, separated by ``gap`` columns.

    Every row's right segment starts at the widest left line plus ``gap``;
    rows below the right block keep that padding.
    """
    left_lines = left.split("\n")
    right_lines = right.split("\n")
    left_width = max((len(line) for line in left_lines), default=0)

    rows: List[str] = []
    for index in range(max(len(left_lines), len(right_lines))):
        left_line = left_lines[index] if index < len(left_lines) else ""
        right_line = right_lines[index] if index < len(right_lines) else ""
        padding = " " * max(0, left_width - len(left_line) + gap)
        rows.append(left_line + padding + right_line)
    return "\n".join(rows)
