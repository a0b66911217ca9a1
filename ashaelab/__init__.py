"""Terms, substitution, reduction, unification and name resolution for a dependently typed elaborator."""

__version__ = "0.1.0"