"""Tests for easing curves."""

import pytest
from gvm import easing
from gvm.easing import EASING_FUNCTIONS, get_easing, list_easing_names

OVERSHOOT = {"easeOutBack", "easeInOutBack"}


class TestEndpoints:
    """Tests for f(0) = 0 and f(1) = 1."""

    @pytest.mark.parametrize("name", list(EASING_FUNCTIONS))
    def test_starts_at_zero(self, name):
        """Should return 0 at x=0."""
        assert EASING_FUNCTIONS[name](0) == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize("name", list(EASING_FUNCTIONS))
    def test_ends_at_one(self, name):
        """Should return 1 at x=1."""
        assert EASING_FUNCTIONS[name](1) == pytest.approx(1.0, abs=1e-12)

    @pytest.mark.parametrize("name", [n for n in EASING_FUNCTIONS if n not in OVERSHOOT])
    def test_standard_curves_stay_in_range(self, name):
        """Should stay within [0, 1] for non-overshoot curves."""
        fn = EASING_FUNCTIONS[name]
        for i in range(101):
            assert -1e-12 <= fn(i / 100) <= 1 + 1e-12


class TestExpo:
    """Tests for the exponential family's pinned endpoints."""

    def test_in_expo_exact_zero(self):
        """Should return exactly 0, not 2**-10."""
        assert easing.ease_in_expo(0) == 0.0

    def test_out_expo_exact_one(self):
        """Should return exactly 1, not 1 - 2**-10."""
        assert easing.ease_out_expo(1) == 1.0

    def test_in_out_expo_exact_endpoints(self):
        """Should pin both endpoints."""
        assert easing.ease_in_out_expo(0) == 0.0
        assert easing.ease_in_out_expo(1) == 1.0
        assert easing.ease_in_out_expo(0.5) == pytest.approx(0.5)

    def test_near_miss_uses_raw_formula(self):
        """Should not clamp inputs that are merely close to 0."""
        assert easing.ease_in_expo(1e-12) == pytest.approx(2 ** -10)


class TestShapes:
    """Tests for representative curve values."""

    def test_quad(self):
        """Should square the input for easeInQuad."""
        assert easing.ease_in_quad(0.5) == 0.25
        assert easing.ease_out_quad(0.5) == 0.75

    def test_in_out_symmetry(self):
        """Should pass through 0.5 at the midpoint."""
        for fn in (easing.ease_in_out_sine, easing.ease_in_out_quad, easing.ease_in_out_cubic,
                   easing.ease_in_out_quart, easing.ease_in_out_quint, easing.ease_in_out_circ):
            assert fn(0.5) == pytest.approx(0.5)

    def test_out_back_overshoots(self):
        """Should exceed 1 between the endpoints."""
        assert max(easing.ease_out_back(i / 100) for i in range(101)) > 1.0

    def test_in_out_back_undershoots(self):
        """Should dip below 0 early in the curve."""
        assert min(easing.ease_in_out_back(i / 100) for i in range(101)) < 0.0

    def test_back_constants(self):
        """Should derive overshoot constants from the base constant."""
        assert easing.C2 == pytest.approx(1.70158 * 1.525)
        assert easing.C3 == pytest.approx(2.70158)


class TestRegistry:
    """Tests for easing lookup."""

    def test_catalog_size(self):
        """Should expose the full catalog plus linear."""
        assert len(list_easing_names()) == 24
        assert "easeInOutSine" in list_easing_names()

    def test_get_by_name(self):
        """Should resolve names to functions."""
        assert get_easing("easeOutCubic") is easing.ease_out_cubic

    def test_callable_passthrough(self):
        """Should return callables unchanged."""
        fn = lambda x: x ** 0.5
        assert get_easing(fn) is fn

    def test_unknown_name(self):
        """Should raise ValueError listing available names."""
        with pytest.raises(ValueError, match="easeInOutSine"):
            get_easing("bounce")
