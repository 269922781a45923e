"""
Настройки, значения по умолчанию и таблица диагностических команд
"""

from .settings import (
    DiagnosticSettings, CaptureSettings, PathSettings, SystemSettings,
    OutputSettings, load_config_file
)
from .cli_parser import CLIParser, create_cli_parser, parse_arguments
from .diagnostic_steps import (
    DiagnosticStep, LineFilter, BASIC_STEPS, SYSTEM_LOG_STEPS, CONDITIONAL_STEPS
)

__all__ = [
    'DiagnosticSettings', 'CaptureSettings', 'PathSettings', 'SystemSettings',
    'OutputSettings', 'load_config_file',
    'CLIParser', 'create_cli_parser', 'parse_arguments',
    'DiagnosticStep', 'LineFilter', 'BASIC_STEPS', 'SYSTEM_LOG_STEPS', 'CONDITIONAL_STEPS',
]
