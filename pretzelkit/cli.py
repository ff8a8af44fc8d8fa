"""
Interactive command loop.

Reads one braid or pretzel per line from stdin and prints its analysis:

    $ echo "AbAb" | pretzelkit
    Pretzel: [(1, 1), (2, -1), (1, 1), (2, -1)]
    The pretzel is a knot whose Seifert surface has genus 1.
    Seifert matrix: [[-1, 1], [0, 1]]
    Alexander polynomial: p(t) = -t^2 + 3 * t - 1
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .analysis import ComponentAnalysis, PretzelAnalysis, analyse_pretzel
from .errors import PretzelParseError
from .formatting import (PretzelVisualizer, format_pretzel, matrix_inline,
                         polynomial_to_string)
from .notation import parse_pretzel
from .simplifier import PretzelSimplifier

logger = logging.getLogger(__name__)

PROMPT = "Enter braid or pretzel (send EOF to quit): "
INDENT = "   "


def _indent_lines(text: str, prefix: str) -> str:
    return "".join(f"{prefix}{line}\n" for line in text.splitlines())


def format_component(c: ComponentAnalysis, prefix: str = "",
                     visualizer: Optional[PretzelVisualizer] = None) -> str:
    """Describe the invariants of one sub-pretzel."""
    if c.is_knot:
        kind = "knot"
    else:
        kind = f"link with {c.components} components"
    out = (f"{prefix}The pretzel is a {kind} whose Seifert surface has genus {c.genus}.\n"
           f"{prefix}Seifert matrix: {matrix_inline(c.seifert_matrix)}\n")

    if visualizer is not None and len(c.pretzel):
        out += _indent_lines(visualizer.visualize(c.pretzel, show_labels=False), prefix)

    if c.alexander_skipped:
        out += (f"{prefix}Not computing Alexander polynomial because the link "
                f"is splittable (the Seifert surface is not connected).\n")
    else:
        out += f"{prefix}Alexander polynomial: p(t) = {polynomial_to_string(c.alexander)}\n"
    return out


def format_analysis(a: PretzelAnalysis,
                    visualizer: Optional[PretzelVisualizer] = None) -> str:
    """Describe a whole analysis, one paragraph per sub-pretzel."""
    out = ""
    prefix = ""
    if a.simplified:
        out += "The pretzel has been simplified.\n"
    if a.is_split:
        out += "The pretzel is a disjoint union of unrelated sub-pretzels"
        if a.simplify_requested:
            out += ".\n"
        else:
            out += ", and we have arranged it accordingly.\n"
        prefix = INDENT
        if len(a.arranged):
            out += f"Input: {format_pretzel(a.arranged)}\n"
            if visualizer is not None:
                out += visualizer.visualize(a.arranged) + "\n"

    label = "Pretzel component" if a.is_split else "Pretzel"
    for c in a.components:
        out += f"{prefix}{label}: {format_pretzel(c.source)}"
        if c.simplified:
            out += f" Simplified: {format_pretzel(c.pretzel)}"
        out += "\n"
        out += format_component(c, prefix, visualizer)
        out += "\n"
    return out


def run(stdin: TextIO, stdout: TextIO, stderr: TextIO,
        simplify: bool = False, draw: bool = False, verbose: bool = False) -> None:
    """Prompt for pretzels until EOF, printing each analysis."""
    visualizer = PretzelVisualizer() if draw else None
    simplifier = PretzelSimplifier(verbose=verbose) if simplify else None

    while True:
        stderr.write(PROMPT)
        stderr.flush()
        line = stdin.readline()
        if not line:
            break
        line = line.rstrip("\n")

        try:
            pr = parse_pretzel(line)
        except PretzelParseError:
            logger.debug("Rejected input %r", line)
            stderr.write(f"Failed to parse input ('{line}') as pretzel; skipping.\n")
            continue

        if simplifier is not None:
            simplifier.reset()
        analysis = analyse_pretzel(pr, simplify=simplify, simplifier=simplifier)
        stdout.write(format_analysis(analysis, visualizer))
        stdout.flush()

    stderr.write("Goodbye.\n")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pretzelkit",
        description="Compute Seifert matrix, genus and Alexander polynomial "
                    "of pretzel links read from stdin")
    parser.add_argument("-s", "--simplify", action="store_true",
                        help="Simplify each pretzel before analysing it")
    parser.add_argument("-d", "--draw", action="store_true",
                        help="Draw each pretzel as ASCII art")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log and print every simplification step")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    run(sys.stdin, sys.stdout, sys.stderr,
        simplify=args.simplify, draw=args.draw, verbose=args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
