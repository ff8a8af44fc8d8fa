"""
Pretzel Simplification for pretzelkit.

Rewrites a pretzel word in place without changing the link it
represents. Three rules are applied, each until it makes no more
progress, in this fixed order:

1. Cancel inverses: a crossing σ_s^e followed later by σ_s^-e, where
   everything in between commutes with σ_s or can be rewritten (via the
   Yang-Baxter relation) to expose σ_s^-e early enough.
2. Commute distant elements: σ_i σ_j -> σ_j σ_i when i > j + 1.
3. Trim lone twists: a strand number that occurs once at the bottom or
   top of the diagram is a destabilisation and can be dropped.

The braid group relations behind these moves:
  - σ_i σ_j = σ_j σ_i if |i-j| > 1 (far commutativity)
  - a^α b^β a^γ = b^γ a^β b^α for |a-b| = 1, valid when α = β or β = γ

One call to simplify() is a single pass through the three rules; use
simplify_fully() to iterate to a fixed point.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Tuple

from .pretzel import Pretzel, Twist

logger = logging.getLogger(__name__)


class SimplificationMove(Enum):
    """Types of simplification moves."""
    CANCELLATION = auto()      # σ_s ... σ_s⁻¹ -> ε
    COMMUTATION = auto()       # σ_i σ_j -> σ_j σ_i (i > j + 1)
    YANG_BAXTER = auto()       # a b a -> b a b
    TRIM_LOWEST = auto()       # drop a lone twist on the lowest strand
    TRIM_HIGHEST = auto()      # drop a lone twist on the highest strand


@dataclass
class SimplificationStep:
    """Record of a single simplification step."""
    move_type: SimplificationMove
    position: int
    description: str
    before_length: int
    after_length: int


def yang_baxter(a: Twist, b: Twist, c: Twist) -> Optional[Tuple[Twist, Twist, Twist]]:
    """
    Apply the Yang-Baxter relation to the triple a b c.

    Returns the equivalent triple, or None if the relation does not apply
    (not three simple crossings of the shape x y x on adjacent strands,
    or the sign pattern +-+ / -+-).
    """
    if not (a.is_crossing and b.is_crossing and c.is_crossing):
        return None
    if a.strand != c.strand or abs(a.strand - b.strand) != 1:
        return None
    if a.count == c.count != b.count:
        return None
    return (Twist(b.strand, c.count), Twist(a.strand, b.count), Twist(b.strand, a.count))


class PretzelSimplifier:
    """
    Simplifies pretzel words using braid group relations.

    The word is edited in place by index. Failed searches never modify
    the word; every successful move either shortens it or strictly
    reduces the number of out-of-order neighbours, so simplification
    terminates.
    """

    def __init__(self, max_iterations: int = 10000,
                 max_yb_depth: int = 64,
                 verbose: bool = False):
        self.max_iterations = max_iterations
        self.max_yb_depth = max_yb_depth
        self.verbose = verbose
        self.steps: List[SimplificationStep] = []
        self.stats: Dict[str, int] = {
            "cancellations": 0,
            "commutations": 0,
            "yang_baxter": 0,
            "trims": 0,
        }

    def simplify(self, pr: Pretzel) -> bool:
        """
        Run each rule to exhaustion, once. Returns True if anything changed.
        """
        word = pr.twists
        changed = self._exhaust(self._cancel_inverses, word)
        changed |= self._exhaust(self._commute_distant, word)
        changed |= self._exhaust(self._trim_lone_twists, word)
        return changed

    def simplify_fully(self, pr: Pretzel) -> bool:
        """Call simplify() until it makes no more progress."""
        changed = False
        for _ in range(self.max_iterations):
            if not self.simplify(pr):
                break
            changed = True
        return changed

    def reset(self) -> None:
        self.steps = []
        self.stats = {k: 0 for k in self.stats}

    def _exhaust(self, rule: Callable[[List[Twist]], bool], word: List[Twist]) -> bool:
        changed = False
        for _ in range(self.max_iterations):
            if not rule(word):
                break
            changed = True
        return changed

    # Rule 1: cancel inverses

    def _cancel_inverses(self, word: List[Twist]) -> bool:
        for i, twist in enumerate(word):
            if not twist.is_crossing:
                continue
            j = self._find_distant(word, i + 1, twist.inverse(), 0)
            if j is None:
                continue
            before = len(word)
            del word[j]
            del word[i]
            self.stats["cancellations"] += 1
            self._record_step(SimplificationMove.CANCELLATION, i,
                              f"{twist!r} cancelled with {twist.inverse()!r} at {j}",
                              before, len(word))
            return True
        return False

    def _find_distant(self, word: List[Twist], start: int,
                      target: Twist, depth: int) -> Optional[int]:
        """
        Find `target` at or after `start` such that every twist before it
        commutes with it. If a non-commuting twist is in the way, try to
        produce `target` at that position with a Yang-Baxter move.

        Returns the position of `target`, or None. The word is only
        modified when a position is returned.
        """
        for k in range(start, len(word)):
            if word[k] == target:
                return k
            if word[k].commutes_with(target):
                continue
            return self._produce_via_yb(word, k, target, depth + 1)
        return None

    def _produce_via_yb(self, word: List[Twist], k: int,
                        target: Twist, depth: int) -> Optional[int]:
        """Rewrite the triple starting at k so that word[k] == target."""
        if depth > self.max_yb_depth:
            return None

        third = self._find_yb_triple(word, k, target, depth)
        if third is None:
            return None

        if third != k + 2:
            before = len(word)
            word.insert(k + 2, word.pop(third))
            self.stats["commutations"] += 1
            self._record_step(SimplificationMove.COMMUTATION, k + 2,
                              f"Slid {word[k + 2]!r} from {third} to {k + 2}",
                              before, len(word))

        word[k:k + 3] = yang_baxter(word[k], word[k + 1], word[k + 2])
        self.stats["yang_baxter"] += 1
        self._record_step(SimplificationMove.YANG_BAXTER, k,
                          f"Exposed {target!r} at {k}", len(word), len(word))
        return k

    def _find_yb_triple(self, word: List[Twist], k: int,
                        target: Twist, depth: int) -> Optional[int]:
        """
        Locate the third twist x of a triple word[k] word[k+1] x that
        rewrites to start with `target`. Returns the position of x, which
        may itself have been produced by a nested Yang-Baxter move.
        """
        if k + 1 >= len(word):
            return None
        first, middle = word[k], word[k + 1]
        if not (first.is_crossing and middle.is_crossing):
            return None
        if middle.strand != target.strand or abs(first.strand - target.strand) != 1:
            return None

        third = Twist(first.strand, target.count)
        if yang_baxter(first, middle, third) is None:
            return None
        return self._find_distant(word, k + 2, third, depth)

    # Rule 2: commute distant elements

    def _commute_distant(self, word: List[Twist]) -> bool:
        for i in range(len(word) - 1):
            if word[i].strand > word[i + 1].strand + 1:
                word[i], word[i + 1] = word[i + 1], word[i]
                self.stats["commutations"] += 1
                self._record_step(SimplificationMove.COMMUTATION, i,
                                  f"Swapped {word[i + 1]!r} and {word[i]!r}",
                                  len(word), len(word))
                return True
        return False

    # Rule 3: trim lone twists

    def _trim_lone_twists(self, word: List[Twist]) -> bool:
        if not word:
            return False

        counts = Counter(t.strand for t in word)
        lowest, highest = min(counts), max(counts)

        if counts[lowest] == 1:
            before = len(word)
            pos = next(i for i, t in enumerate(word) if t.strand == lowest)
            removed = word.pop(pos)
            # Every other strand is above the removed one.
            word[:] = [t.shifted(-1) for t in word]
            self.stats["trims"] += 1
            self._record_step(SimplificationMove.TRIM_LOWEST, pos,
                              f"Removed lone {removed!r} and renumbered", before, len(word))
            return True

        if counts[highest] == 1:
            before = len(word)
            pos = next(i for i, t in enumerate(word) if t.strand == highest)
            removed = word.pop(pos)
            self.stats["trims"] += 1
            self._record_step(SimplificationMove.TRIM_HIGHEST, pos,
                              f"Removed lone {removed!r}", before, len(word))
            return True

        if counts[lowest] == 2 and self._isolate_extreme(word, lowest, lowest + 1):
            return True
        if counts[highest] == 2 and self._isolate_extreme(word, highest, highest - 1):
            return True
        return False

    def _isolate_extreme(self, word: List[Twist], strand: int, neighbour: int) -> bool:
        """
        Turn the two occurrences of an extreme strand into one.

        With exactly one twist on the neighbouring strand between them, the
        outer twists slide inwards (everything else between them is on a
        distant strand) to form x y x, which the Yang-Baxter relation turns
        into y x y. The extreme strand then occurs once and is trimmed on
        the next iteration.
        """
        p, q = [i for i, t in enumerate(word) if t.strand == strand]
        middles = [i for i in range(p + 1, q) if word[i].strand == neighbour]
        if len(middles) != 1:
            return False
        m = middles[0]

        rewritten = yang_baxter(word[p], word[m], word[q])
        if rewritten is None:
            return False

        word[p:q + 1] = word[p + 1:m] + list(rewritten) + word[m + 1:q]
        self.stats["yang_baxter"] += 1
        self._record_step(SimplificationMove.YANG_BAXTER, m - 1,
                          f"Isolated strand {strand} around {rewritten[1]!r}",
                          len(word), len(word))
        return True

    def _record_step(self, move: SimplificationMove, pos: int,
                     desc: str, before: int, after: int):
        """Record a simplification step."""
        step = SimplificationStep(
            move_type=move,
            position=pos,
            description=desc,
            before_length=before,
            after_length=after
        )
        self.steps.append(step)
        logger.debug("[%s] %s: %d -> %d twists", move.name, desc, before, after)

        if self.verbose:
            print(f"  [{move.name}] {desc}: {before} → {after} twists")


def simplify(pr: Pretzel) -> bool:
    """
    Convenience function: one simplification pass over `pr`, in place.

    Returns True if the pretzel was changed.
    """
    return PretzelSimplifier().simplify(pr)


def simplify_fully(pr: Pretzel) -> bool:
    """Simplify `pr` in place until no rule applies. Returns True if it changed."""
    return PretzelSimplifier().simplify_fully(pr)
