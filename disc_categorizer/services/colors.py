"""Primary color selection."""
from typing import Sequence

from disc_categorizer.errors import NoColorsDetectedError
from disc_categorizer.models.detection import DetectedColor, PrimaryColor


def select_primary_color(colors: Sequence[DetectedColor]) -> PrimaryColor:
    """Return the color with the greatest score.

    Scans left to right and only replaces the current winner on a strictly
    greater score, so the first of several tied maxima wins.

    Raises:
        NoColorsDetectedError: If ``colors`` is empty
    """
    if not colors:
        raise NoColorsDetectedError("No colors detected in image")

    best = colors[0]
    for color in colors[1:]:
        if color.score > best.score:
            best = color
    return PrimaryColor(primary=best.name, score=best.score)
