#!/usr/bin/env python3
"""
Выполнение диагностических команд с записью вывода в оба лога
"""

import errno
import shlex
import subprocess
from typing import Optional, Sequence, Tuple

from ..config.diagnostic_steps import DiagnosticStep, LineFilter

SEPARATOR = '=' * 53
OUTPUT_PREFIX = '  | '

# Коды возврата оболочки для команд, которые не удалось запустить
EXIT_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126


class CommandRunner:
    """Класс для последовательного выполнения команд"""

    def __init__(self, context, logger):
        """
        Инициализация

        Args:
            context: RunContext запуска (путь лога сырого вывода)
            logger: DiagnosticLogger для терминала и основного лога
        """
        self.context = context
        self.logger = logger
        self.executed = 0
        self.failed = 0

    def run(self, description: str, argv: Sequence[str],
            line_filter: Optional[LineFilter] = None) -> int:
        """
        Выполнение команды

        Вывод (stdout и stderr в порядке появления) читается целиком,
        затем пишется в лог сырого вывода и построчно через логгер.

        Args:
            description: Описание команды
            argv: Вектор аргументов
            line_filter: Фильтр строк вывода

        Returns:
            Код возврата команды
        """
        command_line = shlex.join(argv)

        self.logger.report(f"\n{SEPARATOR}")
        self.logger.report(f"ВЫПОЛНЯЕТСЯ: {command_line}", 'command')
        self.logger.report(f"{SEPARATOR}\n")
        self.logger.debug(f"Шаг: {description}")

        self._append_output(f"\n{SEPARATOR}\nКОМАНДА: {command_line}\n{SEPARATOR}\n\n")

        returncode, output = self._execute(argv)
        if line_filter is not None:
            output = line_filter.apply(output)

        self._append_output(output)
        # Строки делятся только по \n, как в логе сырого вывода
        lines = output.split('\n')
        if lines[-1] == '':
            lines.pop()
        for line in lines:
            self.logger.report(f"{OUTPUT_PREFIX}{line}", 'output')

        self.executed += 1
        if returncode != 0:
            self.failed += 1
            self.logger.warning(f"⚠️  Код возврата: {returncode}")

        return returncode

    def run_step(self, step: DiagnosticStep) -> int:
        """Выполнение подготовленного шага из таблицы"""
        return self.run(step.description, step.argv, step.line_filter)

    def _execute(self, argv: Sequence[str]) -> Tuple[int, str]:
        """Запуск процесса, stderr объединен с stdout"""
        try:
            result = subprocess.run(
                list(argv),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                stdin=subprocess.DEVNULL,
                check=False
            )
        except FileNotFoundError:
            return EXIT_NOT_FOUND, f"{argv[0]}: command not found\n"
        except OSError as e:
            code = EXIT_NOT_EXECUTABLE if e.errno in (errno.EACCES, errno.ENOEXEC) else EXIT_NOT_FOUND
            return code, f"{argv[0]}: {e.strerror}\n"

        return result.returncode, result.stdout.decode('utf-8', errors='replace')

    def _append_output(self, text: str):
        """Дозапись в лог сырого вывода"""
        if not text:
            return
        with open(self.context.output_log, 'a', encoding='utf-8') as f:
            f.write(text)
