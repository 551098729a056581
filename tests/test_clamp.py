"""Tests for the clamp calculator."""

import pytest

from ruler.clamp import calculate_clamp, validate_min_max
from ruler.errors import ConfigurationError, RangeError
from ruler.units import px_to_rem

_W = (320, 1760)


class TestFluidValues:
    def test_reference_value(self):
        assert calculate_clamp(16, 24, 320, 1760) == "clamp(1rem, 0.5556vw + 0.8889rem, 1.5rem)"

    def test_small_pair(self):
        assert calculate_clamp(8, 16, *_W) == "clamp(0.5rem, 0.5556vw + 0.3889rem, 1rem)"

    def test_large_pair(self):
        assert calculate_clamp(100, 200, *_W) == "clamp(6.25rem, 6.9444vw + 4.8611rem, 12.5rem)"

    def test_custom_width_range_keeps_vw_zeros(self):
        assert calculate_clamp(16, 24, 400, 1200) == "clamp(1rem, 1.0000vw + 0.75rem, 1.5rem)"

    def test_bounds_are_min_and_max_rem(self):
        for lo, hi in [(4, 9), (12, 13), (16, 64), (1.5, 2.25)]:
            result = calculate_clamp(lo, hi, *_W)
            inner = result[len("clamp(") : -1].split(", ")
            assert inner[0] == px_to_rem(lo)
            assert inner[2] == px_to_rem(hi)


class TestStaticValues:
    @pytest.mark.parametrize("size", [0, 8, 16, 20, 24, 17.5])
    def test_equal_sizes_collapse_to_rem(self, size):
        assert calculate_clamp(size, size, *_W) == px_to_rem(size)

    def test_equal_sizes_skip_width_validation(self):
        assert calculate_clamp(16, 16, 1760, 320) == "1rem"


class TestValidation:
    def test_inverted_sizes(self):
        with pytest.raises(RangeError, match=r"min \(24\) must be less than max \(16\)"):
            calculate_clamp(24, 16, *_W)

    def test_inverted_sizes_context(self):
        with pytest.raises(RangeError) as exc_info:
            calculate_clamp(24, 16, *_W)
        assert exc_info.value.context == "size"
        assert exc_info.value.minimum == 24
        assert exc_info.value.maximum == 16

    def test_equal_widths(self):
        with pytest.raises(RangeError, match=r"Invalid width: min \(800\) must be less than max \(800\)"):
            calculate_clamp(16, 24, 800, 800)

    def test_range_error_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            calculate_clamp(16, 24, 1760, 320)

    def test_message_is_tagged(self):
        with pytest.raises(RangeError, match=r"^\[ruler\] "):
            validate_min_max(2, 1, "size")

    def test_fractional_values_in_message(self):
        with pytest.raises(RangeError, match=r"min \(2\.5\) must be less than max \(1\.5\)"):
            validate_min_max(2.5, 1.5, "size")

    def test_valid_range_passes(self):
        validate_min_max(1, 2, "width")

    def test_overflowing_interpolation(self):
        with pytest.raises(ConfigurationError, match="out of range"):
            calculate_clamp(-1e308, 1e308, *_W)
