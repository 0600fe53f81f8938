"""Report generation for Natural Units."""
