#!/usr/bin/env python3
"""
Точка входа в приложение camera_diag

Сбор диагностики камеры на одноплатных компьютерах с Linux:
видеоустройства, возможности драйвера, топология USB, сообщения ядра
и тестовый снимок. Все сохраняется в ./logs и ./snapshots.

python3 -m camera_diag
python3 -m camera_diag --device /dev/video2 --with-hostname
"""

import sys
from typing import Optional, Sequence

import yaml

from .config.cli_parser import parse_arguments
from .core.diagnostic_run import create_diagnostic_run

EXIT_CONFIG_ERROR = 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Основная функция приложения"""
    try:
        settings = parse_arguments(argv)
        diagnostic_run = create_diagnostic_run(settings)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"❌ Ошибка загрузки настроек: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    return diagnostic_run.run()


if __name__ == "__main__":
    sys.exit(main())
