import torch
from torch import Tensor

from ._solve_tridiagonal import solve_tridiagonal


def solve_cyclic_tridiagonal(
    lower: Tensor,
    diag: Tensor,
    upper: Tensor,
    rhs: Tensor,
) -> Tensor:
    """
    Solve a cyclic (periodic) tridiagonal system Ax = b.

    The matrix A has the form:
        [d0  u0   0  ...   0    l0  ]
        [l1  d1  u1  ...   0    0   ]
        [        ...                ]
        [ 0   0  ... lm-2 dm-2 um-2 ]
        [um-1 0  ...   0  lm-1 dm-1 ]

    i.e. ``lower[0]`` couples the first row to the last unknown and
    ``upper[m-1]`` couples the last row to the first unknown.

    Parameters
    ----------
    lower : Tensor
        Sub-diagonal including the top-right corner, shape (m,).
    diag : Tensor
        Main diagonal, shape (m,).
    upper : Tensor
        Super-diagonal including the bottom-left corner, shape (m,).
    rhs : Tensor
        Right-hand side, shape (m, *batch).

    Returns
    -------
    Tensor
        Solution x, shape (m, *batch).

    Notes
    -----
    The last unknown is eliminated from the first m - 1 equations, which
    leaves an ordinary tridiagonal system. It is solved twice:

    - ``direct`` for the right-hand side itself,
    - ``response`` for the unit corner forcing, i.e. the columns that
      multiplied the eliminated unknown (``-lower[0]`` in the first row and
      ``-upper[m-2]`` in the row above the last).

    The solution is ``x[:m-1] = direct + x[m-1] * response``. Substituting
    this into the last (closure) equation yields ``x[m-1]`` once per batch
    entry. The corner response does not depend on the right-hand side, so it
    is solved only once for the whole batch.

    See https://web.archive.org/web/20151220180652/http://www.cfm.brown.edu/people/gk/chap6/node14.html
    """
    m = diag.shape[0]
    if m < 2:
        raise ValueError(f"Cyclic system needs at least 2 unknowns, got {m}")

    head_lower = lower[:-1]
    head_diag = diag[:-1]
    head_upper = upper[:-1]

    direct = solve_tridiagonal(head_lower, head_diag, head_upper, rhs[:-1])

    forcing = torch.zeros(m - 1, dtype=diag.dtype, device=diag.device)
    forcing[0] = forcing[0] - lower[0]
    forcing[-1] = forcing[-1] - upper[-2]
    response = solve_tridiagonal(head_lower, head_diag, head_upper, forcing)

    # (m - 1,) -> (m - 1, *[1] * len(batch)) for broadcasting against rhs
    response = response.view(-1, *([1] * (rhs.dim() - 1)))

    last = (rhs[-1] - upper[-1] * direct[0] - lower[-1] * direct[-1]) / (
        diag[-1] + upper[-1] * response[0] + lower[-1] * response[-1]
    )

    head = direct + last.unsqueeze(0) * response

    return torch.cat([head, last.unsqueeze(0)], dim=0)
