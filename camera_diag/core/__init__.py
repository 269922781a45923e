#!/usr/bin/env python3
"""
Модуль core для запуска диагностики

Содержит контекст запуска и последовательность шагов.
"""

from .run_context import RunContext, create_run_context, ensure_directories
from .diagnostic_run import DiagnosticRun, create_diagnostic_run, EXIT_OK, EXIT_MISSING_TOOL

__all__ = [
    # RunContext
    'RunContext', 'create_run_context', 'ensure_directories',

    # DiagnosticRun
    'DiagnosticRun', 'create_diagnostic_run', 'EXIT_OK', 'EXIT_MISSING_TOOL',
]
