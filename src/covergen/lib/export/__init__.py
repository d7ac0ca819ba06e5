"""Cover letter export renderers."""
