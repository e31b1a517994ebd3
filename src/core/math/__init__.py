"""
Core math modules

Арифметика произвольной точности: контекст точности, матрицы 2×2,
сравнения с толерантностью и форматирование.
"""

# Precision Context
from src.core.math.precision import (
    LOG10_2,
    MIN_PRECISION_BITS,
    PrecisionContext,
    significant_digits,
    validate_precision,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    ABS_TOL_DEFAULT,
    GUARD_BITS_DEFAULT,
    complex_distance,
    is_close_complex,
    matrices_close,
    matrix_distance,
    matrix_scale,
    precision_tolerance,
)

# Matrix Algebra
from src.core.math.matrix2 import (
    EIGENVECTOR_TOLERANCE,
    Matrix2,
    matrix_product,
)

# Formatting
from src.core.math.formatting import (
    decimal_digits,
    format_complex,
    format_evaluation,
    format_matrix,
    format_real,
    format_trace,
)

__all__ = [
    # Precision — Constants
    "LOG10_2",
    "MIN_PRECISION_BITS",
    # Precision — Types
    "PrecisionContext",
    # Precision — Functions
    "significant_digits",
    "validate_precision",
    # Numerical Safeguards — Constants
    "ABS_TOL_DEFAULT",
    "GUARD_BITS_DEFAULT",
    # Numerical Safeguards — Functions
    "complex_distance",
    "is_close_complex",
    "matrices_close",
    "matrix_distance",
    "matrix_scale",
    "precision_tolerance",
    # Matrix Algebra
    "EIGENVECTOR_TOLERANCE",
    "Matrix2",
    "matrix_product",
    # Formatting
    "decimal_digits",
    "format_complex",
    "format_evaluation",
    "format_matrix",
    "format_real",
    "format_trace",
]
