"""
Candidate scorers.
A scorer ranks the candidates of one rule when several elements match.
"""
import re
from typing import Any

from bs4 import Tag

SIZE_TOKEN = re.compile(r"^(\d+)x(\d+)$", re.IGNORECASE)

# Below any concrete size (the smallest is 1x1) and above no size at all
ANY_SIZE_SCORE = 0.5


def score_icon_size(value: Any, element: Tag) -> float:
    """
    Score an icon by the largest area listed in its sizes attribute.

    sizes="16x16 32x32" scores 1024, sizes="any" scores ANY_SIZE_SCORE,
    a missing or unparseable attribute scores 0.
    """
    sizes = element.get("sizes")
    if not sizes:
        return 0
    if isinstance(sizes, list):
        sizes = " ".join(sizes)

    best = 0
    for token in sizes.split():
        if token.lower() == "any":
            best = max(best, ANY_SIZE_SCORE)
            continue
        match = SIZE_TOKEN.match(token)
        if match:
            best = max(best, int(match.group(1)) * int(match.group(2)))
    return best
