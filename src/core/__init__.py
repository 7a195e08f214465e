"""
Core domain models, mathematical primitives, and invariants.

This module contains the arbitrary-precision integer type and the limb
arithmetic it is built on. It is independent of any I/O beyond the
stream helpers in src.core.io.
"""
