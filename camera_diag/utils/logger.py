#!/usr/bin/env python3
"""
Модуль логирования для camera_diag

Каждое сообщение уходит одновременно в терминал (с цветом) и в основной
лог запуска (без ANSI кодов, с временем и уровнем).
"""

import logging
import sys
from pathlib import Path


# ANSI коды цветов
class Colors:
    GREEN = '\033[0;32m'
    RED = '\033[0;31m'
    YELLOW = '\033[0;33m'
    BLUE = '\033[0;34m'
    BOLD = '\033[1m'
    END = '\033[0m'


# Уровень logging и цвет для каждой важности сообщения
SEVERITY_STYLES = {
    'info': (logging.INFO, ''),
    'header': (logging.INFO, Colors.BOLD),
    'section': (logging.INFO, Colors.BOLD + Colors.YELLOW),
    'step': (logging.INFO, Colors.YELLOW),
    'command': (logging.INFO, Colors.BOLD + Colors.BLUE),
    'output': (logging.INFO, ''),
    'success': (logging.INFO, Colors.GREEN),
    'warning': (logging.WARNING, Colors.YELLOW),
    'error': (logging.ERROR, Colors.RED),
}


class ColorFormatter(logging.Formatter):
    """Форматтер консоли: окрашивает сообщение по его важности"""

    def __init__(self, fmt: str = '%(message)s', use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = getattr(record, 'color', '')
        if self.use_color and color and text:
            return f"{color}{text}{Colors.END}"
        return text


class DiagnosticLogger:
    """Класс для вывода сообщений диагностики в терминал и основной лог"""

    def __init__(self, log_file: Path, use_color: bool = True, name: str = 'camera_diag'):
        """
        Инициализация логгера

        Args:
            log_file: Путь к основному лог-файлу запуска
            use_color: Окрашивать вывод в терминал
            name: Имя логгера logging
        """
        self.log_file = Path(log_file)
        self.use_color = use_color
        self.logger = logging.getLogger(name)
        self._setup_logger()

    def _setup_logger(self):
        """Настройка логгера"""
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        # Очищаем хендлеры предыдущего запуска
        self._remove_handlers()

        # Хендлер для файла
        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s'
        ))

        # Хендлер для консоли
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(ColorFormatter(use_color=self.use_color))

        self.logger.addHandler(file_handler)
        self.logger.addHandler(console_handler)

    def _remove_handlers(self):
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

    def report(self, message: str, severity: str = 'info'):
        """
        Вывод сообщения в терминал и основной лог

        Args:
            message: Текст (многострочный текст пишется построчно)
            severity: Важность из SEVERITY_STYLES
        """
        level, color = SEVERITY_STYLES.get(severity, SEVERITY_STYLES['info'])
        for line in message.split('\n'):
            self.logger.log(level, line, extra={'color': color})

    def success(self, message: str):
        """Сообщение об успехе"""
        self.report(message, 'success')

    def warning(self, message: str):
        """Предупреждение"""
        self.report(message, 'warning')

    def error(self, message: str):
        """Ошибка"""
        self.report(message, 'error')

    def debug(self, message: str):
        """Отладочное сообщение (только в файл)"""
        self.logger.debug(message)

    def log_run_info(self, settings, context=None):
        """Логирование параметров запуска в выделенной секции"""
        self.report("=" * 70)
        self.report("📋 ПАРАМЕТРЫ ЗАПУСКА", 'header')
        self.report("=" * 70)

        params = settings.to_dict()
        self.report("📷 КАМЕРА:")
        self.report(f"   Устройство: {params['system']['device']}")
        self.report(f"   Снимок: {params['capture']['width']}x{params['capture']['height']} "
                    f"{params['capture']['pixel_format']}, кадров: {params['capture']['frame_count']}")

        self.report("📁 ДИРЕКТОРИИ:")
        self.report(f"   📂 Логи: {params['paths']['log_dir']}")
        self.report(f"   📂 Снимки: {params['paths']['snap_dir']}")

        if context is not None:
            self.report("📄 ФАЙЛЫ:")
            self.report(f"   Основной лог: {context.main_log}")
            self.report(f"   Вывод команд: {context.output_log}")
            self.report(f"   Снимок: {context.snapshot_path}")
            if context.host:
                self.report(f"   Хост: {context.host}")

        self.report("🔧 СИСТЕМНЫЕ ФАЙЛЫ:")
        self.report(f"   Файл конфигурации ядра: {params['system']['kernel_config']}")
        self.report(f"   config.txt: {params['system']['boot_config']}")
        self.report(f"   firmware config.txt: {params['system']['firmware_config']}")
        self.report("=" * 70)

    def close(self):
        """Закрытие файлов логов"""
        self._remove_handlers()


def create_logger(log_file: Path, use_color: bool = True) -> DiagnosticLogger:
    """Создание экземпляра логгера"""
    return DiagnosticLogger(log_file, use_color)
