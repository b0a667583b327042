"""Donut chart layout and SVG generation."""
