"""Command line interface for image-audit."""
