"""
Linear algebra engines: validation predicates, Vector and Matrix operations.

Modules are used as namespaces:

    from matrix_reloaded.linalg import matrix, vector

    matrix.new(4).and_then(lambda m: matrix.update(m, [[1, 2], [3, 4]], (1, 2)))
"""

from matrix_reloaded.linalg import matrix, validation, vector

__all__ = ["matrix", "validation", "vector"]
