"""
Tests for fixed-width weight overflow detection.

The largest weight in the tree for D is D!, reached along the all-ones hop
path, so the smallest overflowing distance for a width is the first D with
D! above the width's maximum.
"""

from math import factorial

import pytest

from hoptree.core.arithmetic import checked_multiply, max_weight
from hoptree.core.errors import WeightOverflowError
from hoptree.core.runner import DistanceRunner
from hoptree.core.settings import BuilderSettings
from hoptree.core.tree import TreeBuilder


class TestCheckedMultiply:
    """Tests for checked_multiply()."""

    def test_max_weight(self):
        assert max_weight(8) == 255
        assert max_weight(64) == 2**64 - 1

    def test_product_within_range(self):
        assert checked_multiply(factorial(19), 20, 64, target_distance=20) == factorial(20)

    def test_product_at_exact_maximum(self):
        assert checked_multiply(255, 1, 8, target_distance=1) == 255

    def test_sixty_four_bit_boundary(self):
        """20! fits in 64 bits, 21! does not."""
        with pytest.raises(WeightOverflowError) as exc_info:
            checked_multiply(factorial(20), 21, 64, target_distance=21)

        err = exc_info.value
        assert err.target_distance == 21
        assert err.weight_bits == 64
        assert "64-bit" in str(err)
        assert isinstance(err, ArithmeticError)


class TestBuilderOverflow:
    """Overflow surfaces from tree construction, never a wrapped weight."""

    @pytest.mark.parametrize(
        "bits,first_overflow",
        [
            (16, 9),
            (32, 13),
        ],
    )
    def test_smallest_overflowing_distance(self, bits, first_overflow):
        builder = TreeBuilder(BuilderSettings(weight_bits=bits))

        tree = builder.build(first_overflow - 1)
        assert max(node.inverse_weight for node in tree.nodes) == factorial(first_overflow - 1)

        with pytest.raises(WeightOverflowError) as exc_info:
            builder.build(first_overflow)
        assert exc_info.value.target_distance == first_overflow

    def test_weights_never_exceed_width(self):
        builder = TreeBuilder(BuilderSettings(weight_bits=16))
        tree = builder.build(8)

        assert all(node.inverse_weight <= max_weight(16) for node in tree.nodes)


class TestDefaultWidth:
    """The default 64-bit width overflows first at D = 21, whatever the node ceiling."""

    def test_twenty_fits_sixty_four_bits(self):
        """20! fits, so D = 20 passes the peak weight check."""
        TreeBuilder()._check_peak_weight(20)

    def test_twenty_one_overflows_with_default_settings(self):
        with pytest.raises(WeightOverflowError) as exc_info:
            TreeBuilder().build(21)

        assert exc_info.value.target_distance == 21
        assert exc_info.value.weight_bits == 64

    def test_runner_reports_overflow_not_node_limit(self):
        run = DistanceRunner().run_distance(21)

        assert not run.succeeded
        assert "overflows 64-bit" in run.error
        assert "max_nodes" not in run.error

    def test_overflow_detected_before_any_node_is_built(self):
        """An unrepresentable tree fails on weight even when the node ceiling is tiny."""
        builder = TreeBuilder(BuilderSettings(weight_bits=16, max_nodes=1))

        with pytest.raises(WeightOverflowError):
            builder.build(9)
