"""
Fixture modules for svgmetadata tests.

Provides SVG document builders used by the unit tests and conftest.py.
"""
