"""Game primitives and batch simulation."""
