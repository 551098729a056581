"""Tests for fluid — inline ruler.fluid() substitution."""

import pytest

from ruler.errors import ConfigurationError, RangeError
from ruler.fluid import rewrite_fluid_calls

_FLUID_16_24 = "clamp(1rem, 0.5556vw + 0.8889rem, 1.5rem)"


def _rewrite(value):
    return rewrite_fluid_calls(value, 320, 1760)


class TestRewriteFluidCalls:
    def test_single_call(self):
        assert _rewrite("ruler.fluid(16, 24)") == _FLUID_16_24

    def test_static_call(self):
        assert _rewrite("ruler.fluid(20, 20)") == "1.25rem"

    def test_mixed_calls_keep_separator(self):
        assert _rewrite("ruler.fluid(16,16) ruler.fluid(16,24)") == f"1rem {_FLUID_16_24}"

    def test_repeated_identical_calls(self):
        assert _rewrite("ruler.fluid(16,24) ruler.fluid(16,24)") == f"{_FLUID_16_24} {_FLUID_16_24}"

    def test_surrounding_text_untouched(self):
        value = "calc(ruler.fluid(16, 24) * 2) !important"
        assert _rewrite(value) == f"calc({_FLUID_16_24} * 2) !important"

    def test_explicit_widths(self):
        assert _rewrite("ruler.fluid(16, 24, 400, 1200)") == "clamp(1rem, 1.0000vw + 0.75rem, 1.5rem)"

    @pytest.mark.parametrize(
        "args", ["16, 24, 0, 0", "16, 24, x, y", "16, 24, , ", "16, 24, -inf, inf"]
    )
    def test_unusable_widths_fall_back(self, args):
        assert _rewrite(f"ruler.fluid({args})") == _FLUID_16_24

    def test_value_without_calls_is_identical(self):
        value = "  1px solid   red "
        assert _rewrite(value) == value

    def test_decimal_sizes(self):
        assert _rewrite("ruler.fluid(12.5, 12.5)") == "0.7813rem"

    def test_very_large_size(self):
        result = _rewrite("ruler.fluid(16, 1e30)")
        assert result.startswith("clamp(1rem, ")
        assert result.endswith(f", {int(1e30) // 16}rem)")


class TestRewriteErrors:
    @pytest.mark.parametrize(
        "args",
        ["16", "0, 16", "16, 0", "a, 16", "16, b", "16, inf", "-inf, 16", "16, 1e999", "nan, 16"],
    )
    def test_missing_sizes(self, args):
        with pytest.raises(ConfigurationError, match=r"ruler\.fluid\(\) requires minSize and maxSize"):
            _rewrite(f"ruler.fluid({args})")

    def test_inverted_sizes(self):
        with pytest.raises(RangeError, match=r"min \(24\) must be less than max \(16\)"):
            _rewrite("ruler.fluid(24, 16)")

    def test_inverted_widths(self):
        with pytest.raises(RangeError, match="Invalid width"):
            _rewrite("ruler.fluid(16, 24, 1200, 400)")
