"""
Core containers, arbitrary-precision integers, and text/contract adapters.

This module contains the foundational building blocks that are independent
of external systems.
"""
