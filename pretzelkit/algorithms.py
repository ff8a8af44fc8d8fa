"""
Structural algorithms on pretzels.

These are the combinatorial building blocks used by the simplifier and
the Seifert matrix construction:

- Strand counting and missing-strand detection (O(n))
- Partitioning a pretzel into independent sub-pretzels
- Following strands through the diagram to get the exit permutation
- Counting cycles of that permutation (= link components)
"""

from bisect import bisect_left
from typing import Iterable, List, Sequence, Tuple

from .errors import ContractViolation
from .pretzel import Pretzel, Twist


def number_of_strands(pr: Pretzel) -> int:
    """
    Return the largest occurring strand number plus one.

    The simple pretzel [(1, 1)] has two strands; the empty pretzel has one.
    """
    if not pr.twists:
        return 1
    return 1 + max(t.strand for t in pr.twists)


def missing_strands(pr: Pretzel) -> List[int]:
    """
    Return the strand numbers in [1, number_of_strands - 1] that no twist uses.

    A missing strand n means strands 1..n and n+1.. never interact, so the
    pretzel is a disjoint union of smaller pretzels.
    """
    num_strands = number_of_strands(pr)
    present = [False] * num_strands
    for t in pr.twists:
        present[t.strand] = True
    return [n for n in range(1, num_strands) if not present[n]]


def partition_twists(missing: Sequence[int], pr: Pretzel) -> None:
    """
    Stably reorder `pr` in place so that each connected group is contiguous.

    Twists below the first missing strand come first, then those between the
    first and the second missing strand, and so on. Relative order inside
    a group is preserved. `missing` must be sorted and consistent with `pr`,
    e.g. the result of missing_strands(pr).
    """
    if not missing:
        return
    # list.sort is stable, so one sort by group number is the same as one
    # stable partition per missing strand.
    pr.twists.sort(key=lambda t: bisect_left(missing, t.strand))


def group_pretzel_components(missing: Sequence[int], pr: Pretzel) -> List[Tuple[int, int]]:
    """
    Return (start, stop) index ranges of the connected groups of `pr`.

    Assumes `pr` has been partitioned with partition_twists(missing, pr).
    There are always len(missing) + 1 groups; a group is empty when two
    adjacent strands are both missing.
    """
    groups: List[Tuple[int, int]] = []
    twists = pr.twists
    start = 0
    for boundary in missing:
        stop = start
        while stop < len(twists) and twists[stop].strand < boundary:
            stop += 1
        groups.append((start, stop))
        start = stop
    groups.append((start, len(twists)))

    # Each group is bounded above by the scan; check the lower bound.
    for index, (start, stop) in enumerate(groups[1:]):
        if any(t.strand < missing[index] for t in twists[start:stop]):
            raise ContractViolation("partition-order",
                                    f"{pr!r} is not partitioned by {list(missing)}")
    return groups


def make_subpretzel(twists: Iterable[Twist]) -> Pretzel:
    """
    Copy a range of twists into a self-contained pretzel.

    Strand numbers are shifted down so that the smallest becomes 1.
    """
    twists = list(twists)
    if not twists:
        return Pretzel()
    offset = min(t.strand for t in twists) - 1
    return Pretzel(t.shifted(-offset) for t in twists)


def strand_permutations(pr: Pretzel) -> List[int]:
    """
    Follow each strand through the pretzel to find where it exits.

    Returns v with len(v) == number_of_strands(pr), where incoming strand i
    exits as strand v[i - 1]. Following strand m, a twist on strand m moves
    it to m + 1 and a twist on strand m - 1 moves it to m - 1. Every twist
    count is odd, so the count does not matter here.
    """
    permutation = []
    for n in range(1, number_of_strands(pr) + 1):
        m = n
        for t in pr.twists:
            if t.strand == m:
                m += 1
            elif t.strand + 1 == m:
                m -= 1
        permutation.append(m)
    return permutation


def count_permutation_cycles(perm: Sequence[int]) -> int:
    """Count the cycles of a permutation of 1..len(perm)."""
    visited = [False] * len(perm)
    cycles = 0
    for start in range(len(perm)):
        if visited[start]:
            continue
        cycles += 1
        i = start
        while not visited[i]:
            visited[i] = True
            i = perm[i] - 1
    return cycles
