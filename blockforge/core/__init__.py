# blockforge/core/__init__.py
"""
Core building blocks: theme registry, lookup tables, errors.

Everything here is read-only after import.
"""
