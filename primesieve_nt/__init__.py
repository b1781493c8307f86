"""Prime sieving, prime counting, exact integer roots and integer factorization algorithms."""

__version__ = "0.4.4"
__all__ = ["buffer", "counting", "factor", "roots"]