"""
Input validation utilities for graph rendering.

Provides centralized validation functions for render settings, graph
construction and layout parameters. Raises descriptive exceptions on
invalid input; the layout algorithms themselves never re-validate.
"""

from __future__ import annotations

from typing import Any, Sequence


class ValidationError(ValueError):
    """Base exception for validation errors."""

    pass


class InvalidSettingsError(ValidationError):
    """Base exception for invalid render settings."""

    pass


class InvalidDimensionsError(InvalidSettingsError):
    """Raised when canvas width or height is not strictly positive."""

    pass


class InvalidRadiusError(InvalidSettingsError):
    """Raised when the node radius is not strictly positive."""

    pass


class InvalidFontSizeError(InvalidSettingsError):
    """Raised when the font size is not strictly positive."""

    pass


class InvalidStrokeWidthError(InvalidSettingsError):
    """Raised when the stroke width is not strictly positive."""

    pass


class InvalidMarginError(InvalidSettingsError):
    """Raised when a margin lies outside [0.0, 0.5)."""

    pass


class InvalidLinkError(ValidationError):
    """Raised when an edge references nodes that do not exist."""

    pass


def validate_dimensions(width: float, height: float) -> tuple[float, float]:
    """
    Validate canvas dimensions.

    Args:
        width: Canvas width in pixels
        height: Canvas height in pixels

    Returns:
        Validated (width, height) tuple

    Raises:
        InvalidDimensionsError: If either dimension is not positive
    """
    width, height = float(width), float(height)
    if not width > 0 or not height > 0:
        raise InvalidDimensionsError(
            f"Invalid dimensions: ({width}, {height}) must be positive values."
        )
    return width, height


def validate_radius(radius: float) -> float:
    """Validate node radius is positive."""
    radius = float(radius)
    if not radius > 0:
        raise InvalidRadiusError(f"Invalid radius: {radius} must be a positive value.")
    return radius


def validate_font_size(font_size: float) -> float:
    """Validate font size is positive."""
    font_size = float(font_size)
    if not font_size > 0:
        raise InvalidFontSizeError(f"Invalid font size: {font_size} must be a positive value.")
    return font_size


def validate_stroke_width(stroke_width: float) -> float:
    """Validate stroke width is positive."""
    stroke_width = float(stroke_width)
    if not stroke_width > 0:
        raise InvalidStrokeWidthError(
            f"Invalid stroke width: {stroke_width} must be a positive value."
        )
    return stroke_width


def validate_margins(margin_x: float, margin_y: float) -> tuple[float, float]:
    """
    Validate horizontal and vertical margin fractions.

    Args:
        margin_x: Fraction of the width kept free on the left and right
        margin_y: Fraction of the height kept free at the top and bottom

    Returns:
        Validated (margin_x, margin_y) tuple

    Raises:
        InvalidMarginError: If either margin is outside [0.0, 0.5)
    """
    margin_x, margin_y = float(margin_x), float(margin_y)
    if not (0.0 <= margin_x < 0.5) or not (0.0 <= margin_y < 0.5):
        raise InvalidMarginError(
            f"Invalid margins: ({margin_x}, {margin_y}) must lie in the range [0.0, 0.5)."
        )
    return margin_x, margin_y


def validate_link_indices(
    links: Sequence[Any],
    node_count: int,
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate that all link source/target indices are within bounds.

    Args:
        links: Sequence of (source, target) pairs, dicts or objects with
            source/target attributes
        node_count: Number of nodes in the graph
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (link_index, issue_description) tuples

    Raises:
        InvalidLinkError: If strict=True and invalid links found
    """
    issues: list[tuple[int, str]] = []

    for i, link in enumerate(links):
        src, tgt = _get_endpoints(link)

        if src is None:
            issues.append((i, f"Link {i}: source is None"))
        elif src < 0 or src >= node_count:
            issues.append((i, f"Link {i}: source index {src} out of bounds [0, {node_count})"))

        if tgt is None:
            issues.append((i, f"Link {i}: target is None"))
        elif tgt < 0 or tgt >= node_count:
            issues.append((i, f"Link {i}: target index {tgt} out of bounds [0, {node_count})"))

    if strict and issues:
        msg = "Invalid link indices:\n" + "\n".join(issue[1] for issue in issues)
        raise InvalidLinkError(msg)

    return issues


def validate_iterations(iterations: int) -> int:
    """
    Validate iteration count is positive.

    Raises:
        ValidationError: If iterations < 1
    """
    if iterations < 1:
        raise ValidationError(f"iterations must be >= 1, got {iterations}")
    return int(iterations)


def validate_fraction(name: str, value: float) -> float:
    """Validate a fraction lies in [0.0, 0.5)."""
    value = float(value)
    if not 0.0 <= value < 0.5:
        raise ValidationError(f"{name} must be in [0.0, 0.5), got {value}")
    return value


def _get_endpoints(link: Any) -> tuple[Any, Any]:
    """Extract (source, target) from a pair, dict or object."""
    if isinstance(link, dict):
        return link.get("source"), link.get("target")
    if hasattr(link, "source") and hasattr(link, "target"):
        return link.source, link.target
    source, target = link
    return source, target


__all__ = [
    "ValidationError",
    "InvalidSettingsError",
    "InvalidDimensionsError",
    "InvalidRadiusError",
    "InvalidFontSizeError",
    "InvalidStrokeWidthError",
    "InvalidMarginError",
    "InvalidLinkError",
    "validate_dimensions",
    "validate_radius",
    "validate_font_size",
    "validate_stroke_width",
    "validate_margins",
    "validate_link_indices",
    "validate_iterations",
    "validate_fraction",
]
