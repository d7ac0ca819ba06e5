"""Resume decoding and contact extraction."""
