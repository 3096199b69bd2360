"""Diagnostic engine: P-T interpolation, field standards, metrics and fault classification."""
