"""
Pretzel representation for pretzelkit.

A pretzel is a link given as an ordered sequence of twists over
numbered strands. The twist (n, +k) means strand n twists k times
around strand n + 1 starting with an over-crossing; (n, -k) starts
with an under-crossing. A consistent pretzel only contains positive
strand numbers and odd twist counts, since a twist has to exit on the
opposite side from where it entered.

A braid is the special case where every twist count is +1 or -1. Every
pretzel has an equivalent braid, but the pretzel form can be much more
compact.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union
from enum import Enum


class TwistSign(Enum):
    POSITIVE = 1
    NEGATIVE = -1


@dataclass(frozen=True)
class Twist:
    """
    A single twist of strand `strand` around strand `strand + 1`.

    Attributes:
        strand: Which strands are involved (1-indexed, affects strand and strand+1)
        count: Signed number of half-twists; the sign gives the handedness
    """
    strand: int
    count: int

    def __post_init__(self):
        if self.strand < 1:
            raise ValueError(f"Strand index {self.strand} must be at least 1")
        if self.count == 0:
            raise ValueError("Twist count must be non-zero")

    @property
    def sign(self) -> TwistSign:
        return TwistSign.POSITIVE if self.count > 0 else TwistSign.NEGATIVE

    @property
    def is_crossing(self) -> bool:
        """True for a simple over- or under-crossing (count +/-1)."""
        return abs(self.count) == 1

    def inverse(self) -> 'Twist':
        """Return the twist that undoes this one."""
        return Twist(self.strand, -self.count)

    def shifted(self, offset: int) -> 'Twist':
        """Return the same twist moved `offset` strands up (or down if negative)."""
        return Twist(self.strand + offset, self.count)

    def commutes_with(self, other: 'Twist') -> bool:
        """Twists on strands at least two apart can be exchanged freely."""
        return abs(self.strand - other.strand) > 1

    def to_tuple(self) -> Tuple[int, int]:
        return (self.strand, self.count)

    @classmethod
    def from_int(cls, val: int) -> 'Twist':
        """Create a simple crossing from a signed strand number."""
        if val == 0:
            raise ValueError("Braid generator 0 is not valid")
        return cls(abs(val), 1 if val > 0 else -1)

    def __repr__(self) -> str:
        return f"({self.strand}, {self.count})"


TwistLike = Union[Twist, Tuple[int, int]]


def _as_twist(item: TwistLike) -> Twist:
    if isinstance(item, Twist):
        return item
    strand, count = item
    return Twist(strand, count)


class Pretzel:
    """
    An ordered word of twists.

    Order matters: it is the sequence of crossings along the diagram, not
    a multiset. The word is held in a plain list so the simplifier can
    edit it in place by index.
    """

    def __init__(self, twists: Optional[Iterable[TwistLike]] = None):
        self.twists: List[Twist] = [_as_twist(t) for t in twists] if twists else []

    @classmethod
    def from_int_list(cls, word: Sequence[int]) -> 'Pretzel':
        """Create a braid-type pretzel from signed strand numbers."""
        return cls(Twist.from_int(w) for w in word)

    def to_pairs(self) -> List[Tuple[int, int]]:
        """Convert to a list of (strand, count) tuples."""
        return [t.to_tuple() for t in self.twists]

    def is_braid(self) -> bool:
        """True if every twist is a simple crossing."""
        return all(t.is_crossing for t in self.twists)

    def crossing_number(self) -> int:
        """Number of crossings of the diagram (sum of twist magnitudes)."""
        return sum(abs(t.count) for t in self.twists)

    def writhe(self) -> int:
        """Sum of signed crossings."""
        return sum(t.count for t in self.twists)

    def copy(self) -> 'Pretzel':
        return Pretzel(self.twists)

    def __len__(self) -> int:
        return len(self.twists)

    def __iter__(self) -> Iterator[Twist]:
        return iter(self.twists)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Pretzel(self.twists[index])
        return self.twists[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pretzel):
            return NotImplemented
        return self.twists == other.twists

    def __repr__(self) -> str:
        return f"Pretzel([{', '.join(repr(t) for t in self.twists)}])"
