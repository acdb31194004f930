"""
Food placement on a free board cell.
"""

import logging
import random
from typing import Collection, Optional, Tuple

from .errors import PerfectScore

logger = logging.getLogger(__name__)


def generate_food(
    width: int,
    height: int,
    occupied: Collection[Tuple[int, int]],
    rng: Optional[random.Random] = None,
) -> Tuple[int, int]:
    """
    Pick a uniformly random cell (x, y) not present in occupied.

    Every cell of the board is enumerated once, which is fine for
    terminal-sized grids.

    Raises:
        ValueError: occupied is empty (there is no snake on the board).
        PerfectScore: every cell is occupied.
    """
    if not occupied:
        raise ValueError("Cannot place food without a snake on the board.")

    taken = set(occupied)
    available = [
        (x, y)
        for x in range(width)
        for y in range(height)
        if (x, y) not in taken
    ]

    if not available:
        raise PerfectScore()

    rng = rng or random
    cell = available[rng.randrange(len(available))]
    logger.debug("Placed food at %s (%d free cells)", cell, len(available))
    return cell
