"""Tests for the cyclic tridiagonal solver."""

import pytest
import torch


def _dense_cyclic(lower, diag, upper):
    m = diag.shape[0]
    A = torch.diag(diag).clone()
    for i in range(m):
        A[i, (i + 1) % m] += upper[i]
        A[i, (i - 1) % m] += lower[i]
    return A


def _system(m, *batch, seed=0):
    generator = torch.Generator().manual_seed(seed)
    lower = torch.rand(m, generator=generator, dtype=torch.float64) + 0.1
    upper = torch.rand(m, generator=generator, dtype=torch.float64) + 0.1
    diag = 2 * (lower + upper) + 0.5
    rhs = torch.randn(m, *batch, generator=generator, dtype=torch.float64)
    return lower, diag, upper, rhs


class TestSolveCyclicTridiagonal:
    @pytest.mark.parametrize("m", [2, 3, 4, 9])
    def test_matches_dense_solve(self, m):
        from torchinterp.interpolation import solve_cyclic_tridiagonal

        lower, diag, upper, rhs = _system(m)

        x = solve_cyclic_tridiagonal(lower, diag, upper, rhs)

        expected = torch.linalg.solve(_dense_cyclic(lower, diag, upper), rhs)
        torch.testing.assert_close(x, expected, rtol=1e-10, atol=1e-10)

    def test_closure_equation(self):
        """The last row, which wraps around to x[0], is satisfied."""
        from torchinterp.interpolation import solve_cyclic_tridiagonal

        lower, diag, upper, rhs = _system(7, seed=3)

        x = solve_cyclic_tridiagonal(lower, diag, upper, rhs)

        closure = lower[-1] * x[-2] + diag[-1] * x[-1] + upper[-1] * x[0]
        torch.testing.assert_close(closure, rhs[-1], rtol=1e-12, atol=1e-12)

        first = lower[0] * x[-1] + diag[0] * x[0] + upper[0] * x[1]
        torch.testing.assert_close(first, rhs[0], rtol=1e-12, atol=1e-12)

    def test_batched_rhs(self):
        from torchinterp.interpolation import solve_cyclic_tridiagonal

        lower, diag, upper, rhs = _system(6, 2, 3, seed=1)

        x = solve_cyclic_tridiagonal(lower, diag, upper, rhs)

        assert x.shape == (6, 2, 3)
        A = _dense_cyclic(lower, diag, upper)
        for i in range(2):
            for j in range(3):
                torch.testing.assert_close(
                    x[:, i, j],
                    torch.linalg.solve(A, rhs[:, i, j]),
                    rtol=1e-10,
                    atol=1e-10,
                )

    def test_gradcheck(self):
        from torchinterp.interpolation import solve_cyclic_tridiagonal

        lower, diag, upper, rhs = _system(5, seed=2)
        inputs = tuple(
            t.clone().requires_grad_(True) for t in (lower, diag, upper, rhs)
        )

        assert torch.autograd.gradcheck(
            solve_cyclic_tridiagonal, inputs, eps=1e-6
        )

    def test_too_small_system(self):
        from torchinterp.interpolation import solve_cyclic_tridiagonal

        one = torch.ones(1, dtype=torch.float64)
        with pytest.raises(ValueError):
            solve_cyclic_tridiagonal(one, one, one, one)
