"""
Unit tests for style directive reconciliation.

Covers per-category replacement, the bg gradient widening, responsive
prefixes, opaque passthrough and the companion queries.
"""

from __future__ import annotations

import pytest

from pagewright.styles.reconciler import (
    DirectiveSet,
    StyleCategory,
    apply_style,
    category_matcher,
    classify,
    display_value,
    is_style_active,
)

BASE_OVERRIDE = (
    "py-0 md:pt-8 px-1 mb-2 gap-1 text-right bg-card border-8 border-primary "
    "border-double rounded font-bold shadow-sm"
)

# Two successive values for every category
SAMPLE_VALUES: dict[StyleCategory, tuple[str, str]] = {
    StyleCategory.PADDING_Y: ("py-4", "py-12 md:py-24"),
    StyleCategory.PADDING_X: ("px-2", "px-4 md:px-6"),
    StyleCategory.MARGIN_Y: ("mt-4", "my-8"),
    StyleCategory.GAP: ("gap-4", "gap-8"),
    StyleCategory.ALIGN: ("text-left", "text-center"),
    StyleCategory.BG: ("bg-muted", "bg-background/80"),
    StyleCategory.BORDER_WIDTH: ("border", "border-4"),
    StyleCategory.BORDER_COLOR: ("border-border", "border-zinc-500"),
    StyleCategory.BORDER_STYLE: ("border-solid", "border-dotted"),
    StyleCategory.BORDER_RADIUS: ("rounded-md", "rounded-full"),
}


class TestDirectiveSet:
    """Tests for the ordered directive token set."""

    def test_parse_splits_on_any_whitespace(self) -> None:
        tokens = DirectiveSet.parse("  py-4\t px-2\n\nbg-muted  ")
        assert list(tokens) == ["py-4", "px-2", "bg-muted"]

    def test_parse_none_is_empty(self) -> None:
        assert len(DirectiveSet.parse(None)) == 0
        assert str(DirectiveSet.parse("")) == ""

    def test_duplicates_keep_first_position(self) -> None:
        tokens = DirectiveSet.parse("py-4 px-2 py-4")
        assert str(tokens) == "py-4 px-2"

    def test_without_preserves_order(self) -> None:
        tokens = DirectiveSet.parse("a b c d").without(lambda t: t in {"b", "d"})
        assert str(tokens) == "a c"

    def test_first_with_prefix_follows_token_order(self) -> None:
        tokens = DirectiveSet.parse("md:py-8 py-4")
        assert tokens.first_with_prefix(["py-", "md:py-"]) == "md:py-8"
        assert tokens.first_with_prefix([]) is None

    def test_equality(self) -> None:
        assert DirectiveSet.parse("a b") == DirectiveSet(["a", "b"])
        assert DirectiveSet.parse("a b") != DirectiveSet(["b", "a"])


class TestApplyStyleScenarios:
    """Concrete reconciliation scenarios."""

    def test_gradient_replaces_flat_color(self) -> None:
        result = apply_style(
            "py-0 bg-red-500", "bg", "bg-gradient-to-b from-muted/50 to-background"
        )
        assert result == "py-0 bg-gradient-to-b from-muted/50 to-background"

    def test_border_width_leaves_style_and_color(self) -> None:
        result = apply_style("border-2 border-dashed border-zinc-500", "borderWidth", "border-8")
        assert result == "border-dashed border-zinc-500 border-8"

    def test_flat_color_does_not_widen_over_gradient(self) -> None:
        result = apply_style("bg-gradient-to-b from-muted to-background", "bg", "bg-muted")
        assert result == "bg-gradient-to-b from-muted to-background bg-muted"

    def test_palette_opacity_suffix_is_replaced(self) -> None:
        assert apply_style("bg-muted/50 text-sm", "bg", "bg-background") == "text-sm bg-background"

    def test_shade_suffix_is_not_a_palette_token(self) -> None:
        assert apply_style("bg-red-500", "bg", "bg-muted") == "bg-red-500 bg-muted"

    def test_prefixed_tokens_removed_as_whole_units(self) -> None:
        result = apply_style("md:py-8 px-4 lg:hover:py-2 pb-1", "paddingY", "py-12")
        assert result == "px-4 py-12"

    def test_side_scoped_border_is_not_a_color(self) -> None:
        result = apply_style(
            "border-2 border-dashed border-zinc-500 border-x-2", "borderColor", "border-red-500"
        )
        assert result == "border-2 border-dashed border-x-2 border-red-500"

    def test_border_radius(self) -> None:
        assert apply_style("rounded md:rounded-xl p-4", "borderRadius", "rounded-none") == (
            "p-4 rounded-none"
        )

    def test_align_leaves_other_text_utilities(self) -> None:
        assert apply_style("text-center text-sm", "align", "text-left") == "text-sm text-left"

    def test_gap(self) -> None:
        assert apply_style("gap-4 md:gap-8 grid", "gap", "gap-2") == "grid gap-2"

    def test_margin_y(self) -> None:
        assert apply_style("mt-4 mb-2 mx-auto", "marginY", "my-6") == "mx-auto my-6"

    def test_empty_value_clears_category(self) -> None:
        assert apply_style("foo  bar\tpy-2 ", "paddingY", "") == "foo bar"

    def test_unknown_category_only_appends(self) -> None:
        assert apply_style("py-2", "shadow", "shadow-lg") == "py-2 shadow-lg"

    def test_new_tokens_are_deduplicated(self) -> None:
        assert apply_style("px-4", "paddingY", "py-4  py-4") == "px-4 py-4"

    def test_accepts_enum_category(self) -> None:
        assert apply_style("py-2", StyleCategory.PADDING_Y, "py-8") == "py-8"


class TestApplyStyleProperties:
    """Properties that hold for every category."""

    @pytest.mark.parametrize("category", list(StyleCategory))
    def test_no_stale_tokens_accumulate(self, category: StyleCategory) -> None:
        first, second = SAMPLE_VALUES[category]
        result = apply_style(apply_style(BASE_OVERRIDE, category, first), category, second)

        matches = category_matcher(category)
        owned = [token for token in result.split() if matches(token)]
        assert owned == second.split()

    @pytest.mark.parametrize("category", list(StyleCategory))
    def test_clearing_keeps_others_in_order(self, category: StyleCategory) -> None:
        matches = category_matcher(category)
        expected = [token for token in BASE_OVERRIDE.split() if not matches(token)]

        assert apply_style(BASE_OVERRIDE, category, "").split() == expected

    @pytest.mark.parametrize("category", list(StyleCategory))
    def test_write_then_read(self, category: StyleCategory) -> None:
        for value in SAMPLE_VALUES[category]:
            assert is_style_active(apply_style(BASE_OVERRIDE, category, value), value)

    @pytest.mark.parametrize("category", list(StyleCategory))
    def test_applying_same_value_twice_is_stable(self, category: StyleCategory) -> None:
        value = SAMPLE_VALUES[category][0]
        once = apply_style(BASE_OVERRIDE, category, value)
        assert apply_style(once, category, value) == once


class TestQueries:
    """Tests for is_style_active, display_value and classify."""

    def test_multi_token_candidate_requires_all(self) -> None:
        assert is_style_active("py-12 md:py-24", "py-12 md:py-24") is True
        assert is_style_active("py-12", "py-12 md:py-24") is False

    def test_candidate_order_is_irrelevant(self) -> None:
        assert is_style_active("md:py-24 text-sm py-12", "py-12 md:py-24") is True

    def test_empty_candidate_is_never_active(self) -> None:
        assert is_style_active("py-12", "") is False
        assert is_style_active("py-12", "   ") is False

    def test_display_value(self) -> None:
        assert display_value("text-sm py-4 md:py-8", ["py-", "md:py-"]) == "py-4"
        assert display_value("text-sm", ["py-"]) is None
        assert display_value("", ["py-"]) is None

    def test_display_value_single_prefix(self) -> None:
        assert display_value("px-4 py-8", "py-") == "py-8"
        assert display_value("px-4 text-sm", "py-") is None

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("md:py-4", StyleCategory.PADDING_Y),
            ("pl-2", StyleCategory.PADDING_X),
            ("text-right", StyleCategory.ALIGN),
            ("bg-muted/50", StyleCategory.BG),
            ("bg-gradient-to-r", StyleCategory.BG),
            ("border", StyleCategory.BORDER_WIDTH),
            ("border-border", StyleCategory.BORDER_COLOR),
            ("border-none", StyleCategory.BORDER_STYLE),
            ("rounded-lg", StyleCategory.BORDER_RADIUS),
            ("border-x-2", None),
            ("font-bold", None),
            ("[mask:url(#x)]", None),
        ],
    )
    def test_classify(self, token: str, expected: StyleCategory | None) -> None:
        assert classify(token) == expected
