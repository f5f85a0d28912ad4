import torch
from torch import Tensor


def solve_tridiagonal(
    lower: Tensor,
    diag: Tensor,
    upper: Tensor,
    rhs: Tensor,
) -> Tensor:
    """
    Solve a tridiagonal system Ax = b using the Thomas algorithm.

    The matrix A has the form:
        [d0  u0   0   0  ...   0    0  ]
        [l1  d1  u1   0  ...   0    0  ]
        [ 0  l2  d2  u2  ...   0    0  ]
        [        ...                   ]
        [ 0   0   0   0  ... ln-1  dn-1]

    Parameters
    ----------
    lower : Tensor
        Sub-diagonal, shape (n,). ``lower[0]`` is ignored.
    diag : Tensor
        Main diagonal, shape (n,).
    upper : Tensor
        Super-diagonal, shape (n,). ``upper[n-1]`` is ignored.
    rhs : Tensor
        Right-hand side, shape (n, *batch). Every batch entry shares the
        same matrix.

    Returns
    -------
    Tensor
        Solution x, shape (n, *batch).

    Notes
    -----
    No pivoting is performed, so the matrix must be diagonally dominant
    (or otherwise safe for Gaussian elimination without row exchanges).

    This implementation is fully differentiable: the elimination is built
    from lists instead of in-place updates so autograd can track every step.
    """
    n = diag.shape[0]

    # Forward elimination of the sub-diagonal
    diag_list = [diag[0]]
    rhs_list = [rhs[0]]

    for i in range(1, n):
        w = lower[i] / diag_list[i - 1]
        diag_list.append(diag[i] - w * upper[i - 1])
        rhs_list.append(rhs[i] - w * rhs_list[i - 1])

    # Back substitution, from the last row to the first
    x_list = [None] * n
    x_list[n - 1] = rhs_list[n - 1] / diag_list[n - 1]

    for i in range(n - 2, -1, -1):
        x_list[i] = (rhs_list[i] - upper[i] * x_list[i + 1]) / diag_list[i]

    return torch.stack(x_list, dim=0)
