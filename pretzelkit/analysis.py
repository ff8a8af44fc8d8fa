"""
pretzelkit Analysis Pipeline

Computes the invariants of a pretzel, one disjoint sub-pretzel at a time.

QUICK START:
    from pretzelkit import analyse

    result = analyse("AbAb")
    print(result.total_genus)                 # 1
    print(result.components[0].alexander)     # [-1, 3, -1]

A pretzel whose strands fall apart at a missing strand number is split
into groups first. The genus is additive and the Seifert matrix is
block-additive under disjoint unions, so nothing is lost by analysing
the groups separately.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

from .alexander import alexander_polynomial
from .algorithms import (group_pretzel_components, make_subpretzel,
                         missing_strands, partition_twists)
from .matrix import SquareMatrix
from .notation import parse_pretzel
from .pretzel import Pretzel
from .seifert import (compute_genus, compute_seifert_matrix,
                      count_link_components, count_surface_components)
from .simplifier import PretzelSimplifier

logger = logging.getLogger(__name__)


@dataclass
class ComponentAnalysis:
    """Invariants of a single (sub-)pretzel."""
    pretzel: Pretzel
    seifert_matrix: SquareMatrix
    components: int
    surface_components: int
    genus: int
    alexander: Optional[List[int]] = None
    source: Optional[Pretzel] = None
    simplified: bool = False

    @property
    def is_knot(self) -> bool:
        return self.components == 1

    @property
    def alexander_skipped(self) -> bool:
        """True when the Seifert surface is disconnected."""
        return self.alexander is None


@dataclass
class PretzelAnalysis:
    """Result of analysing a whole pretzel."""
    input: Pretzel
    arranged: Pretzel
    simplified: bool = False
    simplify_requested: bool = False
    components: List[ComponentAnalysis] = field(default_factory=list)
    elapsed_ms: float = 0.0

    @property
    def is_split(self) -> bool:
        """True if the pretzel is a disjoint union of several sub-pretzels."""
        return len(self.components) > 1

    @property
    def total_components(self) -> int:
        return sum(c.components for c in self.components)

    @property
    def total_genus(self) -> int:
        return sum(c.genus for c in self.components)

    def __str__(self) -> str:
        kind = "knot" if self.total_components == 1 else f"{self.total_components}-component link"
        return (f"{kind}, genus {self.total_genus}, "
                f"{self.input.crossing_number()} crossings, writhe {self.input.writhe()} "
                f"(analysed in {self.elapsed_ms:.2f}ms)")


def analyse_one(pr: Pretzel) -> ComponentAnalysis:
    """
    Compute the invariants of `pr` as a whole.

    The Alexander polynomial is only computed when the Seifert surface is
    connected; otherwise `alexander` is None.
    """
    sm = compute_seifert_matrix(pr)
    k = count_surface_components(pr)
    result = ComponentAnalysis(
        pretzel=pr,
        seifert_matrix=sm,
        components=count_link_components(pr),
        surface_components=k,
        genus=compute_genus(pr, sm),
        source=pr,
    )
    if k == 1:
        result.alexander = alexander_polynomial(sm)
    return result


def analyse_pretzel(pr: Pretzel, simplify: bool = False,
                    simplifier: Optional[PretzelSimplifier] = None) -> PretzelAnalysis:
    """
    Analyse a pretzel group by group.

    Args:
        pr: The pretzel; it is copied, never modified
        simplify: Simplify the whole pretzel, and then each group, first
        simplifier: Simplifier to use when simplify is True

    Returns:
        PretzelAnalysis with one ComponentAnalysis per group
    """
    start = time.perf_counter()
    if simplify and simplifier is None:
        simplifier = PretzelSimplifier()

    work = pr.copy()
    all_simplified = simplify and simplifier.simplify_fully(work)

    missing = missing_strands(work)
    partition_twists(missing, work)
    groups = group_pretzel_components(missing, work)
    logger.debug("Pretzel %r has missing strands %s and %d groups",
                 work, missing, len(groups))

    result = PretzelAnalysis(input=pr.copy(), arranged=work,
                             simplified=all_simplified,
                             simplify_requested=simplify)
    for g_start, g_stop in groups:
        sub = make_subpretzel(work.twists[g_start:g_stop])
        sub_simplified = simplify and simplifier.simplify_fully(sub)
        component = analyse_one(sub)
        component.source = work[g_start:g_stop]
        component.simplified = sub_simplified
        result.components.append(component)

    result.elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("Analysed %r: %s", pr, result)
    return result


def analyse(text: str, simplify: bool = False) -> PretzelAnalysis:
    """
    Parse braid or pretzel notation and analyse the result.

    Raises:
        PretzelParseError: if the text cannot be parsed
    """
    return analyse_pretzel(parse_pretzel(text), simplify=simplify)
