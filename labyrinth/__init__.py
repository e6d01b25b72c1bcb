"""Seeded maze levels with memoized line-of-sight queries."""
