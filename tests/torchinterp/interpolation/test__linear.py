"""Tests for piecewise linear interpolation."""

import pytest
import torch


class TestLinear:
    def test_builder(self):
        from torchinterp.interpolation import Linear, LinearStrategy

        x = torch.tensor([0.0, 1.0], dtype=torch.float64)
        y = torch.tensor([0.0, 1.0], dtype=torch.float64)

        assert Linear.minimum_data_length == 2
        assert Linear().build(x, y) == LinearStrategy(extrapolate="error")
        assert Linear(extrapolate=True).build(x, y) == LinearStrategy(
            extrapolate="extend"
        )

    def test_values(self):
        from torchinterp.interpolation import linear

        x = torch.tensor([0.0, 1.0, 3.0], dtype=torch.float64)
        y = torch.tensor([1.0, 3.0, -1.0], dtype=torch.float64)

        f = linear(x, y)

        t = torch.tensor([0.0, 0.25, 1.0, 2.0, 3.0], dtype=torch.float64)
        expected = torch.tensor(
            [1.0, 1.5, 3.0, 1.0, -1.0], dtype=torch.float64
        )
        torch.testing.assert_close(f(t), expected)

    def test_two_points(self):
        from torchinterp.interpolation import linear

        x = torch.tensor([2.0, 4.0], dtype=torch.float64)
        y = torch.tensor([[0.0, 10.0], [1.0, 20.0]], dtype=torch.float64)

        f = linear(x, y)

        torch.testing.assert_close(
            f(3.0), torch.tensor([0.5, 15.0], dtype=torch.float64)
        )

    def test_output_shape(self):
        from torchinterp.interpolation import linear

        x = torch.linspace(0, 1, 4, dtype=torch.float64)
        y = torch.randn(4, 2, 3, dtype=torch.float64)

        f = linear(x, y)

        assert f(0.5).shape == (2, 3)
        assert f(torch.rand(5, 6, dtype=torch.float64)).shape == (5, 6, 2, 3)

    def test_out_of_bounds(self):
        from torchinterp.interpolation import (
            InterpolationError,
            OutOfBoundsError,
            linear,
        )

        x = torch.tensor([0.0, 1.0, 2.0], dtype=torch.float64)
        f = linear(x, x**2)

        with pytest.raises(OutOfBoundsError, match="2.5"):
            f(torch.tensor([1.0, 2.5], dtype=torch.float64))

        # OutOfBoundsError is not a construction failure
        with pytest.raises(InterpolationError):
            f(-1.0)

    def test_extrapolate(self):
        from torchinterp.interpolation import linear

        x = torch.tensor([0.0, 1.0, 2.0], dtype=torch.float64)
        y = torch.tensor([0.0, 1.0, 3.0], dtype=torch.float64)

        f = linear(x, y, extrapolate=True)

        t = torch.tensor([-1.0, 3.0], dtype=torch.float64)
        torch.testing.assert_close(
            f(t), torch.tensor([-1.0, 5.0], dtype=torch.float64)
        )

    def test_interpolate_into(self):
        from torchinterp.interpolation import Interpolator1D, Linear

        y = torch.tensor([[0.0, 2.0], [4.0, 6.0]], dtype=torch.float64)
        interpolator = Interpolator1D(y, strategy=Linear())

        target = torch.zeros(3, 2, dtype=torch.float64)
        interpolator.interpolate_into(
            target, torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)
        )

        expected = torch.tensor(
            [[0.0, 2.0], [2.0, 4.0], [4.0, 6.0]], dtype=torch.float64
        )
        torch.testing.assert_close(target, expected)

    def test_interpolate_into_wrong_shape(self):
        from torchinterp.interpolation import (
            DimensionError,
            Interpolator1D,
            Linear,
        )

        y = torch.tensor([1.0, 2.0, 4.0], dtype=torch.float64)
        interpolator = Interpolator1D(y, strategy=Linear())

        target = torch.zeros(5, dtype=torch.float64)
        with pytest.raises(DimensionError, match="wrong shape"):
            interpolator.interpolate_into(target, 1.25)

        assert torch.all(target == 0)

    def test_gradcheck(self):
        from torch.autograd import gradcheck

        from torchinterp.interpolation import linear

        x = torch.tensor([0.0, 1.0, 3.0], dtype=torch.float64)
        t = torch.tensor([0.3, 1.7, 2.2], dtype=torch.float64)

        def fn(y):
            return linear(x, y)(t)

        y = torch.randn(3, 2, dtype=torch.float64, requires_grad=True)

        assert gradcheck(fn, (y,), eps=1e-6, atol=1e-4)
