"""Tests for render settings and the settings builder."""

import pytest

from graph_svg import (
    CircularLayout,
    Graph,
    HierarchicalLayout,
    InvalidDimensionsError,
    InvalidFontSizeError,
    InvalidMarginError,
    InvalidRadiusError,
    InvalidStrokeWidthError,
    Settings,
    SettingsBuilder,
)


class TestSettingsDefaults:
    """Default values."""

    def test_defaults(self):
        """Defaults match a 1000x1000 canvas with a circular layout."""
        settings = Settings()
        assert settings.size == (1000.0, 1000.0)
        assert settings.node_radius == 25.0
        assert settings.font_size == 16.0
        assert settings.stroke_width == 5.0
        assert settings.margin_x == 0.05
        assert settings.margin_y == 0.05
        assert isinstance(settings.layout, CircularLayout)
        assert settings.node_label_fn is None
        assert settings.edge_color_fn is None


class TestSettingsValidation:
    """Invalid values raise distinct errors."""

    def test_invalid_dimensions(self):
        """Non-positive width or height is rejected."""
        with pytest.raises(InvalidDimensionsError):
            Settings(width=0)
        settings = Settings()
        with pytest.raises(InvalidDimensionsError):
            settings.height = -10

    def test_invalid_radius(self):
        """Non-positive radius is rejected."""
        with pytest.raises(InvalidRadiusError):
            Settings(node_radius=0)

    def test_invalid_font_size(self):
        """Non-positive font size is rejected."""
        with pytest.raises(InvalidFontSizeError):
            Settings(font_size=-2)

    def test_invalid_stroke_width(self):
        """Non-positive stroke width is rejected."""
        with pytest.raises(InvalidStrokeWidthError):
            Settings(stroke_width=0)

    def test_invalid_margin(self):
        """Margins must lie in [0, 0.5)."""
        with pytest.raises(InvalidMarginError):
            Settings(margin_x=0.5)
        settings = Settings()
        with pytest.raises(InvalidMarginError):
            settings.margin_y = -0.01

    def test_failed_set_keeps_value(self):
        """A rejected value leaves the setting unchanged."""
        settings = Settings(width=300)
        with pytest.raises(InvalidDimensionsError):
            settings.width = 0
        assert settings.width == 300.0

    def test_layout_must_be_callable(self):
        """layout accepts layouts and callables only."""
        settings = Settings()
        with pytest.raises(TypeError):
            settings.layout = "circular"

    def test_constructor_rejects_non_callable_layout(self):
        """The constructor applies the same layout check as the setter."""
        with pytest.raises(TypeError, match="layout must be"):
            Settings(layout=5)

    def test_builder_rejects_non_callable_layout(self):
        """build() reports a bad layout instead of deferring to rendering."""
        with pytest.raises(TypeError):
            SettingsBuilder().layout(5).build()

    def test_nan_values_rejected(self):
        """NaN is not a positive size."""
        with pytest.raises(InvalidDimensionsError):
            Settings(width=float("nan"))
        with pytest.raises(InvalidRadiusError):
            Settings(node_radius=float("nan"))


class TestSettingsLayout:
    """Resolving layouts and custom position maps."""

    def test_position_map_for_runs_layout(self):
        """A layout instance is run against the graph."""
        graph = Graph.from_links(3, [(0, 1), (1, 2)])
        settings = Settings(layout=HierarchicalLayout())
        position_map = settings.position_map_for(graph)
        assert position_map(0) == (0.0, 0.0)

    def test_position_map_for_custom_callable(self):
        """A custom position map is returned untouched."""

        def fixed(node):
            return (0.1, 0.9)

        settings = Settings(layout=fixed)
        assert settings.position_map_for(Graph(nodes=[None])) is fixed


class TestSettingsBuilder:
    """Fluent builder."""

    def test_builder_chain(self):
        """Every setter returns the builder."""
        layout = HierarchicalLayout()
        settings = (
            SettingsBuilder()
            .width(500)
            .height(400)
            .node_radius(10)
            .font_size(12)
            .stroke_width(2)
            .margin_x(0.1)
            .margin_y(0.2)
            .layout(layout)
            .node_label_fn(str)
            .edge_label_fn(str)
            .node_color_fn(lambda node: "red")
            .edge_color_fn(lambda edge: "gray")
            .build()
        )
        assert settings.size == (500.0, 400.0)
        assert settings.node_radius == 10.0
        assert settings.font_size == 12.0
        assert settings.stroke_width == 2.0
        assert (settings.margin_x, settings.margin_y) == (0.1, 0.2)
        assert settings.layout is layout
        assert settings.node_label_fn is str
        assert settings.node_color_fn(0) == "red"
        assert settings.edge_color_fn(0) == "gray"

    def test_builder_defaults(self):
        """An empty builder yields default settings."""
        assert SettingsBuilder().build().size == Settings().size

    def test_builder_position_map(self):
        """position_map() installs a custom callable."""

        def fixed(node):
            return (0.5, 0.5)

        assert SettingsBuilder().position_map(fixed).build().layout is fixed

    def test_builder_validates_on_build(self):
        """Invalid values surface from build()."""
        builder = SettingsBuilder().node_radius(-1)
        with pytest.raises(InvalidRadiusError):
            builder.build()
