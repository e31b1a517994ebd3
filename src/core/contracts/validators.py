"""
JSON Schema Contract Validators

Контракт JSON отчёта о вычислении образа слова. Схемы лежат в schema/
рядом с модулем и устанавливаются вместе с пакетом как package data.

Схемы:
- evaluation_report.json (слово, z, матрица, след, опционально спектр)
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

EVALUATION_REPORT_SCHEMA: Final[str] = "evaluation_report"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение схем из каталога с мета-валидацией и кэшем по имени."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: нет файла <schema_name>.json
            ValueError: файл не является корректной схемой draft 2020-12
        """
        if schema_name not in self._schemas:
            path = self._schema_dir / f"{schema_name}.json"
            if not path.exists():
                raise FileNotFoundError(f"Schema not found: {path}")

            schema = json.loads(path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e
            self._schemas[schema_name] = schema
        return self._schemas[schema_name]


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class EvaluationReportValidator:
    """Валидатор отчёта evaluation_report."""

    def __init__(self, loader: SchemaLoader | None = None):
        schema = (loader or SchemaLoader()).load_schema(EVALUATION_REPORT_SCHEMA)
        self._validator = Draft202012Validator(schema)

    def validate(self, report: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: первое найденное нарушение контракта
        """
        self._validator.validate(report)


_REPORT_VALIDATOR: EvaluationReportValidator | None = None


def validate_evaluation_report(report: Dict[str, Any]) -> None:
    """
    Проверка отчёта общим (лениво созданным) валидатором.

    Raises:
        jsonschema.ValidationError: если отчёт нарушает контракт
    """
    global _REPORT_VALIDATOR
    if _REPORT_VALIDATOR is None:
        _REPORT_VALIDATOR = EvaluationReportValidator()
    _REPORT_VALIDATOR.validate(report)
