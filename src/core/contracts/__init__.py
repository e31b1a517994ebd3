"""
Contract Validation Module

JSON Schema контракт отчёта о вычислении.
"""

from .validators import (
    EVALUATION_REPORT_SCHEMA,
    SCHEMA_DIR,
    EvaluationReportValidator,
    SchemaLoader,
    validate_evaluation_report,
)

__all__ = [
    # Constants
    "EVALUATION_REPORT_SCHEMA",
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "EvaluationReportValidator",
    # Functions
    "validate_evaluation_report",
]
