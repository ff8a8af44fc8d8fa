"""
pretzelkit: Topological invariants of pretzel links

A pretzel is a link given as a word of twists over numbered strands, a
generalisation of braid words. pretzelkit computes, for any pretzel:

- The Seifert matrix of its canonical Seifert surface
- The number of link components and Seifert surface components
- The genus of the Seifert surface
- The Alexander polynomial, by interpolating det(M - t M^T)

Before analysis a pretzel can be simplified with braid relations
(inverse cancellation, far commutativity, Yang-Baxter, and trimming of
lone twists) and split into its disjoint sub-pretzels.

INPUT NOTATIONS:
- Braid notation: "1 2 -1 2"
- Pretzel notation: "A3b1C5"
- Simple pretzel notation: "AbAb"
"""

from .pretzel import Pretzel, Twist, TwistSign
from .errors import (
    PretzelError,
    PretzelParseError,
    DimensionMismatchError,
    ContractViolation,
)
from .algorithms import (
    number_of_strands,
    missing_strands,
    partition_twists,
    group_pretzel_components,
    make_subpretzel,
    strand_permutations,
    count_permutation_cycles,
)
from .simplifier import (
    PretzelSimplifier,
    SimplificationMove,
    SimplificationStep,
    simplify,
    simplify_fully,
)
from .matrix import Matrix, SquareMatrix, vandermonde
from .seifert import (
    compute_homology,
    compute_seifert_matrix,
    compute_genus,
    count_link_components,
    count_surface_components,
)
from .alexander import alexander_polynomial
from .notation import parse_pretzel, try_parse_pretzel
from .formatting import (
    format_pretzel,
    format_pretzel_letters,
    matrix_inline,
    matrix_block,
    polynomial_to_string,
    PretzelVisualizer,
)
from .analysis import (
    analyse,
    analyse_one,
    analyse_pretzel,
    ComponentAnalysis,
    PretzelAnalysis,
)

__version__ = "1.0.0"
__all__ = [
    # Core data structures
    "Pretzel",
    "Twist",
    "TwistSign",
    # Errors
    "PretzelError",
    "PretzelParseError",
    "DimensionMismatchError",
    "ContractViolation",
    # Structural algorithms
    "number_of_strands",
    "missing_strands",
    "partition_twists",
    "group_pretzel_components",
    "make_subpretzel",
    "strand_permutations",
    "count_permutation_cycles",
    # Simplification
    "PretzelSimplifier",
    "SimplificationMove",
    "SimplificationStep",
    "simplify",
    "simplify_fully",
    # Matrices
    "Matrix",
    "SquareMatrix",
    "vandermonde",
    # Invariants
    "compute_homology",
    "compute_seifert_matrix",
    "compute_genus",
    "count_link_components",
    "count_surface_components",
    "alexander_polynomial",
    # Input and output
    "parse_pretzel",
    "try_parse_pretzel",
    "format_pretzel",
    "format_pretzel_letters",
    "matrix_inline",
    "matrix_block",
    "polynomial_to_string",
    "PretzelVisualizer",
    # Analysis
    "analyse",
    "analyse_one",
    "analyse_pretzel",
    "ComponentAnalysis",
    "PretzelAnalysis",
]
