"""
Dice Combinatorics

Exact counts of the ways N dice with S faces can produce each sum.

Key functions:
- ways_to_make_sum: recursive count for a single target sum
- sum_combinations: table of counts for every attainable sum, built by
  convolving one die at a time

All counts are Python ints, so S ** N is exact even at 100 ** 10.
"""

from functools import lru_cache
from typing import Dict


@lru_cache(maxsize=None)
def ways_to_make_sum(dice_remaining: int, target_sum: int, sides_count: int) -> int:
    """
    Count the ordered face assignments of `dice_remaining` dice that total `target_sum`.

    Recurrence: W(n, t) = Σ_{f=1..S} W(n-1, t-f), with W(0, 0) = 1.

    Unreachable targets (t < n or t > n*S) are pruned before recursing, which
    keeps the call tree proportional to the reachable states rather than S ** n.

    Args:
        dice_remaining: Number of dice still to assign (>= 0)
        target_sum: Sum those dice must reach (may be negative)
        sides_count: Faces per die (>= 2)

    Returns:
        Number of ways, 0 if the sum is unreachable
    """
    if target_sum < dice_remaining or target_sum > dice_remaining * sides_count:
        return 0
    if dice_remaining == 0:
        return 1 if target_sum == 0 else 0

    return sum(
        ways_to_make_sum(dice_remaining - 1, target_sum - face, sides_count)
        for face in range(1, sides_count + 1)
    )


def sum_combinations(dice_count: int, sides_count: int) -> Dict[int, int]:
    """
    Count the ways to make every sum in [dice_count, dice_count * sides_count].

    Starts from the zero-dice distribution {0: 1} and convolves in one uniform
    die per step. Each step is a sliding-window sum of width `sides_count`
    over the previous table, so the whole build is O(N^2 * S).

    Args:
        dice_count: Number of dice (>= 0)
        sides_count: Faces per die (>= 2)

    Returns:
        Dictionary mapping each attainable sum to its number of ways
    """
    ways = [1]
    for _ in range(dice_count):
        # ways[i] counts sums of (min_sum + i) for the dice placed so far
        next_ways = []
        window = 0
        for j in range(len(ways) + sides_count - 1):
            if j < len(ways):
                window += ways[j]
            if j >= sides_count:
                window -= ways[j - sides_count]
            next_ways.append(window)
        ways = next_ways

    return {dice_count + offset: count for offset, count in enumerate(ways)}
