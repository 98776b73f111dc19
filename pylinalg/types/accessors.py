"""
Generic row, column and diagonal accessors.

These work on any matrix satisfying MatrixLike and any vector satisfying
VectorLike: they only use size(), rows(), cols() and element access, so
they apply equally to Matrix3, Matrix4, MatrixN and user types.

Copy semantics:
    - get_*: copies as many elements as fit into the target vector and
      zero-pads any excess target elements
    - set_*: writes only as many elements as fit in the matrix line
    - diagonal offset d: 0 is the main diagonal, d > 0 moves toward the
      last column, d < 0 toward the last row

Example:
    >>> A = MatrixN([[1, 2, 3], [4, 5, 6]])
    >>> get_row(A, 1)
    VectorN(4.0, 5.0, 6.0)
    >>> get_diag(A, 1)
    VectorN(2.0, 6.0)
"""

from typing import Optional

from pylinalg.core.protocols import MatrixLike, VectorLike
from pylinalg.core.validation import check_index
from pylinalg.types.vector import VectorN


def _diag_cells(A: MatrixLike, d: int) -> list[tuple[int, int]]:
    rows, cols = A.rows(), A.cols()
    if not -rows < d < cols:
        raise IndexError(f"diagonal offset {d} out of range for {rows}x{cols} matrix")
    if d >= 0:
        return [(i, i + d) for i in range(min(rows, cols - d))]
    return [(i - d, i) for i in range(min(rows + d, cols))]


def _copy_out(A: MatrixLike, cells: list[tuple[int, int]], u: Optional[VectorLike]) -> VectorLike:
    if u is None:
        u = VectorN(len(cells))
    n = u.size()
    for k in range(n):
        u[k] = A[cells[k]] if k < len(cells) else 0.0
    return u


def _copy_in(u: VectorLike, A: MatrixLike, cells: list[tuple[int, int]]) -> None:
    for k in range(min(u.size(), len(cells))):
        A[cells[k]] = u[k]


def get_row(A: MatrixLike, row: int, u: Optional[VectorLike] = None) -> VectorLike:
    """
    Copy row `row` of A into u.

    Args:
        A: Source matrix
        row: Row index
        u: Target vector; a new VectorN(A.cols()) when None

    Returns:
        The target vector
    """
    i = check_index(row, A.rows(), 'row')
    return _copy_out(A, [(i, j) for j in range(A.cols())], u)


def set_row(u: VectorLike, A: MatrixLike, row: int) -> None:
    """Copy u into row `row` of A (as many elements as fit)."""
    i = check_index(row, A.rows(), 'row')
    _copy_in(u, A, [(i, j) for j in range(A.cols())])


def get_col(A: MatrixLike, col: int, u: Optional[VectorLike] = None) -> VectorLike:
    """Copy column `col` of A into u (a new VectorN(A.rows()) when None)."""
    j = check_index(col, A.cols(), 'col')
    return _copy_out(A, [(i, j) for i in range(A.rows())], u)


def set_col(u: VectorLike, A: MatrixLike, col: int) -> None:
    """Copy u into column `col` of A (as many elements as fit)."""
    j = check_index(col, A.cols(), 'col')
    _copy_in(u, A, [(i, j) for i in range(A.rows())])


def get_diag(A: MatrixLike, d: int = 0, u: Optional[VectorLike] = None) -> VectorLike:
    """
    Copy the diagonal at offset d of A into u.

    Raises:
        IndexError: If no diagonal exists at offset d
    """
    return _copy_out(A, _diag_cells(A, int(d)), u)


def set_diag(u: VectorLike, A: MatrixLike, d: int = 0) -> None:
    """Copy u onto the diagonal at offset d of A (as many elements as fit)."""
    _copy_in(u, A, _diag_cells(A, int(d)))


def swap_rows(A: MatrixLike, i: int, j: int) -> None:
    """Exchange rows i and j of A in place; no-op when i == j."""
    i = check_index(i, A.rows(), 'row')
    j = check_index(j, A.rows(), 'row')
    if i == j:
        return
    for c in range(A.cols()):
        A[i, c], A[j, c] = A[j, c], A[i, c]


def swap_cols(A: MatrixLike, i: int, j: int) -> None:
    """Exchange columns i and j of A in place; no-op when i == j."""
    i = check_index(i, A.cols(), 'col')
    j = check_index(j, A.cols(), 'col')
    if i == j:
        return
    for r in range(A.rows()):
        A[r, i], A[r, j] = A[r, j], A[r, i]
