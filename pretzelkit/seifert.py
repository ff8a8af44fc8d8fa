"""
Seifert matrix computation for pretzelkit.

The Seifert surface of a pretzel is built from one disc per strand and
one twisted band per twist. Its first homology has a generator for each
pair of consecutive twists on the same strand; the Seifert matrix
records the linking numbers between those generators.

See http://www.maths.ed.ac.uk/~jcollins/SeifertMatrix/ for the
construction.

Derived quantities need no further traversal:
- Link components: cycles of the strand permutation
- Seifert surface components: number of missing strands + 1
- Genus: (k + dim(M) - n) / 2
"""

from typing import List, Optional

from .algorithms import count_permutation_cycles, missing_strands, strand_permutations
from .errors import ContractViolation
from .matrix import SquareMatrix
from .pretzel import Pretzel


def compute_homology(pr: Pretzel) -> List[int]:
    """
    For each twist except the last, find the next twist on the same strand.

    Entry i is the 1-based position of that twist, or 0 if there is none.

    Time complexity: O(n^2) where n = number of twists
    """
    twists = pr.twists
    homology = []
    for i in range(len(twists) - 1):
        partner = 0
        for j in range(i + 1, len(twists)):
            if twists[j].strand == twists[i].strand:
                partner = j + 1
                break
        homology.append(partner)
    return homology


def compute_seifert_matrix(pr: Pretzel) -> SquareMatrix:
    """
    Compute the Seifert matrix of a pretzel.

    Rows and columns are indexed by twists that have a homology partner.
    Twist counts are odd, so every division by two below is exact; the
    integer division is intentional.

    Raises:
        ContractViolation: if the case analysis reaches a configuration
            that a consistent homology vector cannot produce
    """
    twists = pr.twists
    if len(twists) < 2:
        return SquareMatrix(0, dtype=int)

    homology = compute_homology(pr)
    n = len(homology)
    sm = SquareMatrix(n, dtype=int)

    for i in range(n):
        if homology[i] == 0:
            continue
        for j in range(i, n):
            if homology[j] == 0:
                continue

            if i == j:
                # Self-linking of the generator between twist i and its partner.
                sm[i, i] = -((twists[i].count + twists[homology[i] - 1].count) // 2)
            elif homology[i] > homology[j]:
                pass
            elif homology[i] < j + 1:
                pass
            elif homology[i] == j + 1:
                # Consecutive generators share twist j.
                sm[i, j] = (twists[j].count - 1) // 2
                sm[j, i] = (twists[j].count + 1) // 2
            elif abs(twists[i].strand - twists[j].strand) > 1:
                pass
            elif twists[i].strand == twists[j].strand + 1:
                sm[j, i] = -1
            elif twists[i].strand + 1 == twists[j].strand:
                sm[i, j] = 1
            else:
                raise ContractViolation(
                    "seifert-case",
                    f"unhandled generator pair ({i}, {j}) with homology "
                    f"{homology} in {pr!r}")

    # Prune generators without a partner, from the back so that earlier
    # indices stay valid.
    for i in reversed(range(n)):
        if homology[i] == 0:
            sm.remove_row(i)
            # Removing the last row already leaves a 0x0 matrix.
            if sm.rows:
                sm.remove_col(i)

    return sm


def count_link_components(pr: Pretzel) -> int:
    """Number of components of the link (cycles of the strand permutation)."""
    return count_permutation_cycles(strand_permutations(pr))


def count_surface_components(pr: Pretzel) -> int:
    """Number of connected components of the Seifert surface."""
    return len(missing_strands(pr)) + 1


def compute_genus(pr: Pretzel, seifert: Optional[SquareMatrix] = None) -> int:
    """
    Genus of the Seifert surface.

    Equivalent expressions, with n link components, k surface components,
    s strands (= Seifert circles), c twists and M the Seifert matrix:

        g = k - (s - c + n) / 2
          = k - (k - dim(M) + n) / 2     using dim(M) = k - (s - c)
          = (k + dim(M) - n) / 2

    Raises:
        ContractViolation: if k + dim(M) - n is odd
    """
    if seifert is None:
        seifert = compute_seifert_matrix(pr)
    k = count_surface_components(pr)
    n = count_link_components(pr)
    numerator = k + seifert.dim - n
    if numerator % 2 != 0:
        raise ContractViolation(
            "genus-parity",
            f"k + dim(M) - n = {k} + {seifert.dim} - {n} is odd for {pr!r}")
    return numerator // 2
