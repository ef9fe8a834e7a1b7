"""Tests for section and wrapper class composition."""

from __future__ import annotations

from pagewright.runtime.expander import build_node
from pagewright.specs.layout import GlobalDesignConfig, LayoutConfig, ThemeMode
from pagewright.styles.composer import (
    content_wrapper_classes,
    global_section_defaults,
    merge_directives,
    resolve_node_classes,
    root_wrapper_classes,
)
from pagewright.styles.reconciler import apply_style


class TestMergeDirectives:
    def test_upper_category_evicts_lower(self) -> None:
        assert merge_directives("p-4 text-center", "text-left") == "p-4 text-left"

    def test_opaque_tokens_of_both_layers_survive(self) -> None:
        assert merge_directives("w-full font-bold", "shadow-lg") == "w-full font-bold shadow-lg"

    def test_gradient_upper_evicts_any_background(self) -> None:
        result = merge_directives("bg-red-500 py-2", "bg-gradient-to-r from-primary")
        assert result == "py-2 bg-gradient-to-r from-primary"

    def test_border_color_keeps_side_widths(self) -> None:
        result = merge_directives("w-full border-b md:border-x-2 border-border", "border-red-500")
        assert result == "w-full border-b md:border-x-2 border-red-500"

    def test_side_width_in_upper_keeps_lower_color(self) -> None:
        assert merge_directives("w-full border-border", "border-t") == "w-full border-border border-t"

    def test_empty_upper_is_identity(self) -> None:
        assert merge_directives("w-full  text-center", "") == "w-full text-center"


class TestResolveNodeClasses:
    """The three-layer composition used by preview and export."""

    def test_defaults_then_global(self) -> None:
        node = build_node("hero")
        classes = resolve_node_classes(node, GlobalDesignConfig())
        assert classes == "w-full text-center py-12 md:py-24 px-4 md:px-6 shadow-none"

    def test_override_wins_per_category(self) -> None:
        node = build_node("hero")
        node.style_override = "py-8 text-left"
        classes = resolve_node_classes(node, GlobalDesignConfig())
        assert classes == "w-full px-4 md:px-6 shadow-none py-8 text-left"

    def test_variant_background_replaced_by_override(self) -> None:
        node = build_node("stats", variant="split")
        node.style_override = "bg-background"
        classes = resolve_node_classes(node, GlobalDesignConfig()).split()
        assert "bg-muted/50" not in classes
        assert classes[-1] == "bg-background"

    def test_chrome_sections_keep_their_padding(self) -> None:
        node = build_node("nav")
        classes = resolve_node_classes(node, GlobalDesignConfig(padding_y="py-32"))
        assert "py-32" not in classes.split()
        assert "py-4" in classes.split()

    def test_recolored_chrome_keeps_divider(self) -> None:
        for component_type, divider in (("nav", "border-b"), ("footer", "border-t")):
            node = build_node(component_type)
            node.style_override = apply_style("", "borderColor", "border-red-500")
            classes = resolve_node_classes(node, GlobalDesignConfig()).split()
            assert divider in classes
            assert "border-border" not in classes
            assert classes[-1] == "border-red-500"

    def test_shadow_with_border_color_keeps_divider(self) -> None:
        design = GlobalDesignConfig(shadow="shadow-lg border-primary/20")
        for component_type, divider in (("nav", "border-b"), ("footer", "border-t")):
            classes = resolve_node_classes(build_node(component_type), design).split()
            assert divider in classes
            assert "border-primary/20" in classes

    def test_global_shadow_applies_to_every_section(self) -> None:
        design = GlobalDesignConfig(shadow="shadow-md")
        for component_type in ("nav", "faq", "footer"):
            node = build_node(component_type)
            assert global_section_defaults(node, design).split()[-1] == "shadow-md"

    def test_node_without_variant_uses_default_variant(self) -> None:
        node = build_node("hero")
        node.variant = None
        assert "text-center" in resolve_node_classes(node, GlobalDesignConfig()).split()


class TestWrapperClasses:
    def test_root_defaults(self) -> None:
        classes = root_wrapper_classes(LayoutConfig(), GlobalDesignConfig())
        assert classes == (
            "relative flex flex-col min-h-screen text-foreground bg-background p-4 font-sans dark"
        )

    def test_root_light_and_centered(self) -> None:
        classes = root_wrapper_classes(
            LayoutConfig(is_centered_vertical=True),
            GlobalDesignConfig(mode=ThemeMode.LIGHT),
        ).split()
        assert "justify-center" in classes
        assert "dark" not in classes

    def test_content_defaults(self) -> None:
        classes = content_wrapper_classes(LayoutConfig(), GlobalDesignConfig())
        assert classes == "flex flex-col w-full mx-auto max-w-7xl gap-0"

    def test_content_border(self) -> None:
        layout = LayoutConfig(show_border=True, border_style="border-dotted")
        classes = content_wrapper_classes(layout, GlobalDesignConfig(gap="gap-8"))
        assert classes.endswith("gap-8 border-2 border-dotted border-zinc-500")
