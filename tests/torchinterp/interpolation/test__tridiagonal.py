"""Tests for tridiagonal solver."""

import torch


def _dense(lower, diag, upper):
    n = diag.shape[0]
    A = torch.diag(diag)
    if n > 1:
        A = A + torch.diag(upper[:-1], 1) + torch.diag(lower[1:], -1)
    return A


class TestSolveTridiagonal:
    def test_simple_3x3_system(self):
        """Test solving a simple 3x3 tridiagonal system."""
        from torchinterp.interpolation import solve_tridiagonal

        # System: [2 1 0] [x0]   [1]
        #         [1 2 1] [x1] = [2]
        #         [0 1 2] [x2]   [1]
        lower = torch.tensor([0.0, 1.0, 1.0], dtype=torch.float64)
        diag = torch.tensor([2.0, 2.0, 2.0], dtype=torch.float64)
        upper = torch.tensor([1.0, 1.0, 0.0], dtype=torch.float64)
        rhs = torch.tensor([1.0, 2.0, 1.0], dtype=torch.float64)

        x = solve_tridiagonal(lower, diag, upper, rhs)

        # Verify Ax = b
        result = torch.zeros_like(rhs)
        result[0] = diag[0] * x[0] + upper[0] * x[1]
        result[1] = lower[1] * x[0] + diag[1] * x[1] + upper[1] * x[2]
        result[2] = lower[2] * x[1] + diag[2] * x[2]

        torch.testing.assert_close(result, rhs, rtol=1e-10, atol=1e-10)

    def test_unused_band_entries_are_ignored(self):
        """lower[0] and upper[-1] lie outside the matrix."""
        from torchinterp.interpolation import solve_tridiagonal

        diag = torch.tensor([4.0, 4.0, 4.0, 4.0], dtype=torch.float64)
        rhs = torch.tensor([1.0, -2.0, 3.0, 0.5], dtype=torch.float64)

        x1 = solve_tridiagonal(
            torch.tensor([0.0, 1.0, 2.0, 1.0], dtype=torch.float64),
            diag,
            torch.tensor([1.0, 2.0, 1.0, 0.0], dtype=torch.float64),
            rhs,
        )
        x2 = solve_tridiagonal(
            torch.tensor([99.0, 1.0, 2.0, 1.0], dtype=torch.float64),
            diag,
            torch.tensor([1.0, 2.0, 1.0, -99.0], dtype=torch.float64),
            rhs,
        )

        torch.testing.assert_close(x1, x2, rtol=0.0, atol=0.0)

    def test_single_equation(self):
        from torchinterp.interpolation import solve_tridiagonal

        x = solve_tridiagonal(
            torch.zeros(1, dtype=torch.float64),
            torch.tensor([4.0], dtype=torch.float64),
            torch.zeros(1, dtype=torch.float64),
            torch.tensor([[2.0, -8.0]], dtype=torch.float64),
        )

        torch.testing.assert_close(
            x, torch.tensor([[0.5, -2.0]], dtype=torch.float64)
        )

    def test_batched_rhs(self):
        """Test with batched right-hand side along trailing dimensions."""
        from torchinterp.interpolation import solve_tridiagonal

        lower = torch.tensor([0.0, 1.0, 1.0], dtype=torch.float64)
        diag = torch.tensor([2.0, 2.0, 2.0], dtype=torch.float64)
        upper = torch.tensor([1.0, 1.0, 0.0], dtype=torch.float64)
        # Batch of 2 right-hand sides, each of length 3
        rhs = torch.tensor(
            [[1.0, 2.0], [2.0, 4.0], [1.0, 2.0]], dtype=torch.float64
        )

        x = solve_tridiagonal(lower, diag, upper, rhs)

        assert x.shape == (3, 2)
        # Second solution should be 2x the first
        torch.testing.assert_close(
            x[:, 1], 2 * x[:, 0], rtol=1e-10, atol=1e-10
        )

    def test_multiple_batch_dimensions(self):
        from torchinterp.interpolation import solve_tridiagonal

        n = 6
        lower = torch.rand(n, dtype=torch.float64)
        upper = torch.rand(n, dtype=torch.float64)
        diag = 3 + torch.rand(n, dtype=torch.float64)
        rhs = torch.randn(n, 2, 3, dtype=torch.float64)

        x = solve_tridiagonal(lower, diag, upper, rhs)

        A = _dense(lower, diag, upper)
        expected = torch.linalg.solve(A, rhs.reshape(n, -1)).reshape(n, 2, 3)

        torch.testing.assert_close(x, expected, rtol=1e-10, atol=1e-10)

    def test_gradcheck(self):
        """Test gradients through the solver."""
        from torchinterp.interpolation import solve_tridiagonal

        lower = torch.tensor(
            [0.0, 1.0, 1.0], dtype=torch.float64, requires_grad=True
        )
        diag = torch.tensor(
            [2.0, 2.0, 2.0], dtype=torch.float64, requires_grad=True
        )
        upper = torch.tensor(
            [1.0, 1.0, 0.0], dtype=torch.float64, requires_grad=True
        )
        rhs = torch.tensor(
            [1.0, 2.0, 1.0], dtype=torch.float64, requires_grad=True
        )

        def fn(lo, d, u, r):
            return solve_tridiagonal(lo, d, u, r)

        assert torch.autograd.gradcheck(
            fn, (lower, diag, upper, rhs), eps=1e-6
        )

    def test_larger_system(self):
        """Test a larger system against torch.linalg.solve."""
        from torchinterp.interpolation import solve_tridiagonal

        n = 50
        lower = torch.ones(n, dtype=torch.float64)
        diag = 4 * torch.ones(n, dtype=torch.float64)
        upper = torch.ones(n, dtype=torch.float64)
        rhs = torch.randn(n, dtype=torch.float64)

        x = solve_tridiagonal(lower, diag, upper, rhs)

        x_expected = torch.linalg.solve(_dense(lower, diag, upper), rhs)

        torch.testing.assert_close(x, x_expected, rtol=1e-10, atol=1e-10)
