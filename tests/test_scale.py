"""Tests for scale — generate_clamps and compile_scale."""

import pytest

from ruler.errors import RangeError
from ruler.scale import compile_scale, custom_property_name, generate_clamps
from ruler.schemas.scale import ScaleConfig, ScaleEntry, SizePair

_XS = SizePair(name="xs", values=(8, 16))
_SM = SizePair(name="sm", values=(16, 24))
_MD = SizePair(name="md", values=(24, 32))
_LG = SizePair(name="lg", values=(32, 48))


@pytest.fixture(scope="module")
def two_pair_scale():
    return generate_clamps([_XS, _SM], 320, 1760, generate_all_cross_pairs=True)


class TestBaseEntries:
    def test_one_entry_per_pair_in_order(self):
        entries = generate_clamps([_SM, _XS], 320, 1760, generate_all_cross_pairs=False)
        assert entries == [
            ScaleEntry("sm", "clamp(1rem, 0.5556vw + 0.8889rem, 1.5rem)"),
            ScaleEntry("xs", "clamp(0.5rem, 0.5556vw + 0.3889rem, 1rem)"),
        ]

    def test_static_pair(self):
        entries = generate_clamps(
            [SizePair("fixed", (24, 24)), SizePair("fluid", (24, 32))],
            320,
            1760,
            generate_all_cross_pairs=False,
        )
        assert [e.rendered for e in entries] == [
            "1.5rem",
            "clamp(1.5rem, 0.5556vw + 1.3889rem, 2rem)",
        ]

    def test_inverted_pair_raises(self):
        with pytest.raises(RangeError, match=r"min \(24\) must be less than max \(16\)"):
            generate_clamps([SizePair("bad", (24, 16))], 320, 1760, generate_all_cross_pairs=False)


class TestCrossPairs:
    def test_single_cross_entry(self, two_pair_scale):
        assert len(two_pair_scale) == 3
        assert two_pair_scale[2] == ScaleEntry(
            "xs-sm", "clamp(0.5rem, 1.1111vw + 0.2778rem, 1.5rem)"
        )

    def test_cross_entries_follow_base_entries(self, two_pair_scale):
        assert [e.label for e in two_pair_scale] == ["xs", "sm", "xs-sm"]
        assert [e.is_cross_pair for e in two_pair_scale] == [False, False, True]

    def test_label_ordered_by_minimum_not_definition(self):
        entries = generate_clamps([_SM, _XS], 320, 1760, generate_all_cross_pairs=True)
        assert entries[2].label == "xs-sm"
        assert entries[2].rendered == "clamp(0.5rem, 1.1111vw + 0.2778rem, 1.5rem)"

    def test_combination_count_and_order(self):
        entries = generate_clamps([_XS, _SM, _MD, _LG], 320, 1760, generate_all_cross_pairs=True)
        assert len(entries) == 4 + 6
        assert [e.label for e in entries[4:]] == [
            "xs-sm",
            "xs-md",
            "xs-lg",
            "sm-md",
            "sm-lg",
            "md-lg",
        ]

    def test_equal_minimum_keeps_definition_order(self):
        first = SizePair("a", (8, 16))
        second = SizePair("b", (8, 24))
        entries = generate_clamps([second, first], 320, 1760, generate_all_cross_pairs=True)
        assert entries[2].label == "b-a"
        assert entries[2].rendered == "clamp(0.5rem, 0.5556vw + 0.3889rem, 1rem)"

    def test_spans_smaller_min_to_larger_max(self):
        entries = generate_clamps([_XS, _LG], 320, 1760, generate_all_cross_pairs=True)
        assert entries[2].rendered.startswith("clamp(0.5rem, ")
        assert entries[2].rendered.endswith(", 3rem)")


class TestCompileScale:
    def test_uses_config_widths_and_flag(self):
        config = ScaleConfig(
            min_width=400,
            max_width=1200,
            prefix="gap",
            generate_all_cross_pairs=False,
            pairs=(_SM,),
        )
        assert compile_scale(config) == (
            ScaleEntry("sm", "clamp(1rem, 1.0000vw + 0.75rem, 1.5rem)"),
        )

    def test_custom_property_name(self):
        assert custom_property_name("space", "xs-sm") == "--space-xs-sm"
