#!/usr/bin/env python3
"""
Запуск диагностики камеры: последовательное выполнение всех шагов

Порядок: контекст -> директории -> проверка v4l2-ctl -> базовые команды ->
снимок -> системные логи -> условные команды -> итог. Ошибка отдельной
команды не прерывает сбор; досрочно завершает работу только отсутствие
v4l2-ctl.
"""

from datetime import datetime
from typing import Iterable, Optional

from ..config.defaults import REQUIRED_TOOL
from ..config.diagnostic_steps import (
    BASIC_STEPS, CONDITIONAL_STEPS, SYSTEM_LOG_STEPS, DiagnosticStep
)
from ..config.settings import DiagnosticSettings
from ..utils.command_runner import CommandRunner
from ..utils.file_namer import FileNamer
from ..utils.image_capture import CaptureResult, SnapshotCapture
from ..utils.logger import DiagnosticLogger, create_logger
from ..utils.system_checks import MissingToolError, ensure_tool_available, guard_passes
from .run_context import RunContext, create_run_context, ensure_directories

EXIT_OK = 0
EXIT_MISSING_TOOL = 1


class DiagnosticRun:
    """Один запуск сбора диагностики"""

    def __init__(self, settings: DiagnosticSettings,
                 namer: Optional[FileNamer] = None,
                 now: Optional[datetime] = None):
        self.settings = settings
        self.context: RunContext = create_run_context(settings, namer, now)
        self.logger: Optional[DiagnosticLogger] = None
        self.runner: Optional[CommandRunner] = None
        self.capture_result: Optional[CaptureResult] = None

    def run(self) -> int:
        """
        Выполнение всех шагов

        Returns:
            0 если v4l2-ctl найден (независимо от ошибок команд), иначе 1
        """
        ensure_directories(self.context)
        self.logger = create_logger(self.context.main_log, self.settings.output.color)
        self.runner = CommandRunner(self.context, self.logger)

        try:
            return self._run_all()
        finally:
            self.logger.close()

    def _run_all(self) -> int:
        log = self.logger
        log.report(f"Запуск диагностики камеры {self.context.started_at:%Y-%m-%d %H:%M:%S}", 'header')
        log.report(f"📁 Логи будут сохранены в: {self.context.log_dir}")

        try:
            ensure_tool_available(REQUIRED_TOOL)
        except MissingToolError as e:
            log.error(f"❌ {e}")
            return EXIT_MISSING_TOOL
        log.success(f"✅ {REQUIRED_TOOL} установлен.")

        log.log_run_info(self.settings, self.context)

        log.report("\nБазовая диагностика камеры", 'section')
        self._run_steps(BASIC_STEPS, verb='Проверка')

        log.report("\nЗахват тестового снимка", 'section')
        self.capture_result = SnapshotCapture(self.context, self.runner, self.settings.capture).capture()

        log.report("\nСбор системных логов", 'section')
        self._run_steps(SYSTEM_LOG_STEPS, verb='Получение')

        log.report("\nУсловная диагностика", 'section')
        self._run_steps(CONDITIONAL_STEPS, verb='Проверка')

        self._report_summary()
        return EXIT_OK

    def _run_steps(self, steps: Iterable[DiagnosticStep], verb: str):
        """Выполнение шагов таблицы; шаги с невыполненным условием пропускаются молча"""
        values = self.context.placeholders()
        for template in steps:
            step = template.render(values)
            if not guard_passes(step):
                continue
            self.logger.report(f"\n{verb}: {step.description}...", 'step')
            self.runner.run_step(step)

    def _report_summary(self):
        log = self.logger
        log.report(f"\nДиагностика камеры завершена {datetime.now():%Y-%m-%d %H:%M:%S}", 'success')
        log.report(f"Выполнено команд: {self.runner.executed}, с ошибками: {self.runner.failed}")
        log.report(f"📁 Лог-файлы сохранены в: {self.context.log_dir}")
        log.report(f"📷 Снимок (если успешен) сохранен в: {self.context.snap_dir}")


def create_diagnostic_run(settings: DiagnosticSettings) -> DiagnosticRun:
    """Создание запуска диагностики с указанными настройками"""
    return DiagnosticRun(settings)
