"""
Alexander polynomial from a Seifert matrix.

The polynomial p(t) = det(M - t M^T) has degree at most d = dim(M).
Rather than expanding the determinant symbolically, we evaluate it at
d + 1 points and interpolate: augment a Vandermonde matrix of the points
with a column of the values and solve by Gauss-Jordan elimination.

The true coefficients are integers, but the elimination runs in floating
point, so the result is rounded to the nearest integer at the end. With
partial pivoting the error stays far below 0.5 for the small matrices
pretzels produce.
"""

from typing import List

from .matrix import SquareMatrix, vandermonde


def alexander_polynomial(seifert: SquareMatrix) -> List[int]:
    """
    Compute the Alexander polynomial of a Seifert matrix.

    Returns:
        Coefficients starting at degree zero. The empty matrix gives [1].
    """
    d = seifert.dim

    # Step 1: Vandermonde matrix at points 0, 1, ..., d with one spare column.
    points = [float(p) for p in range(d + 1)]
    augmented = vandermonde(d + 2, points)

    # Step 2: Fill in p(t) = det(M - t M^T) at those points.
    last_col = augmented.cols - 1
    am = seifert.astype(float)
    for i, t in enumerate(points):
        augmented[i, last_col] = (am + am.transpose() * (-t)).determinant()

    # Step 3: Solve the linear system.
    solution = augmented.gauss_jordan()

    # Step 4: Read the coefficients back and round.
    return [round(solution[d - i, last_col]) for i in range(d + 1)]
