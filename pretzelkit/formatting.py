"""
Text output for pretzels, matrices and polynomials.

Since pretzelkit runs in a terminal, pretzels are drawn as ASCII art
(one block per twist) and matrices and polynomials as plain strings.
"""

from typing import List, Sequence

from .algorithms import number_of_strands
from .matrix import Matrix
from .notation import MAX_LETTER_STRAND
from .pretzel import Pretzel, Twist, TwistSign

_SUBSCRIPTS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")
_SUPERSCRIPTS = str.maketrans("-0123456789", "⁻⁰¹²³⁴⁵⁶⁷⁸⁹")


def format_twist(twist: Twist) -> str:
    return f"({twist.strand}, {twist.count})"


def format_pretzel(pr: Pretzel) -> str:
    """Format as a list of pairs, e.g. "[(1, -1), (2, 1), (1, 1)]"."""
    return "[" + ", ".join(format_twist(t) for t in pr) + "]"


def format_pretzel_letters(pr: Pretzel) -> str:
    """
    Format in pretzel notation, e.g. "A3b1" or "AbAb" for braids.

    Raises:
        ValueError: if a strand number has no letter
    """
    simple = pr.is_braid()
    parts = []
    for t in pr:
        if t.strand > MAX_LETTER_STRAND:
            raise ValueError(f"Strand {t.strand} has no letter in pretzel notation")
        upper = chr(ord("A") + t.strand - 1)
        letter = upper if t.sign is TwistSign.POSITIVE else upper.lower()
        parts.append(letter if simple else f"{letter}{abs(t.count)}")
    return "".join(parts)


def matrix_inline(m: Matrix, outer_sep: str = ", ", inner_sep: str = ", ") -> str:
    """Format as nested lists on one line, e.g. "[[1, 0], [-1, 1]]"."""
    rows = ("[" + inner_sep.join(str(m[i, j]) for j in range(m.cols)) + "]"
            for i in range(m.rows))
    return "[" + outer_sep.join(rows) + "]"


def matrix_block(m: Matrix, prefix: str = "", width: int = 0) -> str:
    """Format one "| a b |" line per row; an empty matrix is "[]"."""
    if m.rows == 0:
        return f"{prefix}[]\n"
    lines = []
    for i in range(m.rows):
        cells = "".join(f" {m[i, j]:>{width}}" for j in range(m.cols))
        lines.append(f"{prefix}|{cells} |\n")
    return "".join(lines)


def _format_term(coeff: int, degree: int, symbol: str) -> str:
    if degree == 0:
        return str(coeff)
    power = symbol if degree == 1 else f"{symbol}^{degree}"
    if coeff == 1:
        return power
    return f"{coeff} * {power}"


def polynomial_to_string(coeffs: Sequence[int], symbol: str = "t") -> str:
    """
    Format coefficients (degree zero first) as a polynomial in `symbol`,
    highest degree first.

    Examples:
        [-3, 2, 1]   -> "t^2 + 2 * t - 3"
        [0, 0, 8, -3] -> "-3 * t^3 + 8 * t^2"
    """
    result = ""
    for degree in reversed(range(len(coeffs))):
        c = coeffs[degree]
        if c == 0:
            continue
        if not result:
            if c < 0 and degree > 0:
                result = "-" + _format_term(-c, degree, symbol)
            else:
                result = _format_term(c, degree, symbol)
        elif c > 0:
            result += " + " + _format_term(c, degree, symbol)
        else:
            result += " - " + _format_term(-c, degree, symbol)
    return result or "0"


class PretzelVisualizer:
    """
    Creates ASCII art visualizations of pretzels.

    Each twist is drawn as a three-line block over all strands:
    - | : vertical strand
    - X : twist starting with an over-crossing
    - x : twist starting with an under-crossing
    The twist count is printed beside the block when it is not +/-1.
    """

    def __init__(self, strand_spacing: int = 3):
        self.strand_spacing = strand_spacing

    def visualize(self, pr: Pretzel, show_labels: bool = True) -> str:
        n = number_of_strands(pr)
        if not pr.twists:
            return "Empty pretzel (unknot)\nStrands: " + " ".join("|" for _ in range(n))

        lines = []
        if show_labels:
            header = "  " + "".join(f"{i:^{self.strand_spacing}}" for i in range(1, n + 1))
            lines.append(header)
            lines.append("  " + "-" * (n * self.strand_spacing))

        for idx, twist in enumerate(pr):
            block = self._draw_twist(twist, n)
            if abs(twist.count) != 1:
                block[1] += f"  x{abs(twist.count)}"
            for line in block:
                lines.append(f"{idx + 1:2d}" + line if show_labels else line)

        if show_labels:
            lines.append("  " + "-" * (n * self.strand_spacing))
        return "\n".join(lines)

    def _draw_twist(self, twist: Twist, num_strands: int) -> List[str]:
        top, mid, bot = "", "", ""
        for strand in range(1, num_strands + 1):
            if strand == twist.strand:
                top += " \\ "
                mid += "  X" if twist.sign is TwistSign.POSITIVE else "  x"
                bot += " / "
            elif strand == twist.strand + 1:
                top += " / "
                mid += "   "
                bot += " \\ "
            else:
                top += " | "
                mid += " | "
                bot += " | "
        return [top, mid, bot]

    def visualize_compact(self, pr: Pretzel) -> str:
        """Single-line σ notation: σ₁³σ₂⁻¹..."""
        if not pr.twists:
            return "ε (unknot)"
        parts = []
        for t in pr:
            subscript = str(t.strand).translate(_SUBSCRIPTS)
            if t.count == 1:
                power = ""
            else:
                power = str(t.count).translate(_SUPERSCRIPTS)
            parts.append(f"σ{subscript}{power}")
        return "".join(parts)
