"""
Core algebra, domain models, and law checks.

This package contains the opaque Point2d container, the algebraic structure
descriptors it is built from, and tooling for checking their laws.
"""
