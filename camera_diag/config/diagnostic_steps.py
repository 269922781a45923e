#!/usr/bin/env python3
"""
Таблица диагностических команд для camera_diag

Каждый шаг - описание, вектор аргументов (без оболочки), необязательный
фильтр строк вывода и необязательное условие запуска (наличие утилиты
или файла). Порядок в таблицах - порядок выполнения.
"""

import glob
import re
from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from .defaults import LOG_TAIL_LINES

# Шаблон поиска камерных сообщений в dmesg и journalctl
CAMERA_LOG_PATTERN = r'camera|video|v4l|uvc|usb.*cam'
CAMERA_MODULE_PATTERN = r'video|camera|uvc|v4l'
KERNEL_CONFIG_PATTERN = r'V4L|CAMERA|UVC'
BOOT_CONFIG_PATTERN = r'camera|start_x|dtoverlay'


@dataclass(frozen=True)
class LineFilter:
    """Фильтр строк вывода (замена конвейера `| grep | tail`)"""
    pattern: Optional[str] = None
    ignore_case: bool = True
    tail: Optional[int] = None

    def apply(self, text: str) -> str:
        """Оставить совпавшие строки, затем последние tail строк"""
        lines = text.splitlines()
        if self.pattern:
            regex = re.compile(self.pattern, re.IGNORECASE if self.ignore_case else 0)
            lines = [line for line in lines if regex.search(line)]
        if self.tail is not None:
            lines = lines[-self.tail:] if self.tail > 0 else []
        return "\n".join(lines) + "\n" if lines else ""


@dataclass(frozen=True)
class DiagnosticStep:
    """Один диагностический шаг"""
    description: str
    argv: Tuple[str, ...]
    line_filter: Optional[LineFilter] = None
    requires_tool: Optional[str] = None
    requires_file: Optional[str] = None
    expand_globs: bool = False

    def render(self, values: Dict[str, str]) -> 'DiagnosticStep':
        """
        Подстановка значений контекста запуска в аргументы и условие

        Args:
            values: Значения для {device}, {kernel_config} и т.д.

        Returns:
            Новый шаг с готовым вектором аргументов
        """
        argv = []
        for token in self.argv:
            token = token.format(**values)
            if self.expand_globs and any(ch in token for ch in '*?['):
                # Без совпадений оставляем шаблон как есть, как это делает оболочка
                argv.extend(sorted(glob.glob(token)) or [token])
            else:
                argv.append(token)

        requires_file = self.requires_file.format(**values) if self.requires_file else None
        return replace(self, argv=tuple(argv), requires_file=requires_file)


BASIC_STEPS = (
    DiagnosticStep('Видеоустройства', ('ls', '-la', '/dev/video*'), expand_globs=True),
    DiagnosticStep('Список устройств V4L2', ('v4l2-ctl', '--list-devices')),
    DiagnosticStep('Информация об устройстве', ('v4l2-ctl', '--device', '{device}', '--all')),
    DiagnosticStep('Топология USB', ('lsusb', '-t')),
    DiagnosticStep('USB устройства', ('lsusb',)),
    DiagnosticStep('Доступные форматы', ('v4l2-ctl', '-d', '{device}', '--list-formats-ext')),
    DiagnosticStep('Драйвер устройства', ('v4l2-ctl', '-d', '{device}', '--info')),
    DiagnosticStep('Элементы управления', ('v4l2-ctl', '-d', '{device}', '--list-ctrls')),
)

SYSTEM_LOG_STEPS = (
    DiagnosticStep('Сообщения ядра', ('dmesg',),
                   line_filter=LineFilter(CAMERA_LOG_PATTERN, tail=LOG_TAIL_LINES)),
    DiagnosticStep('Загруженные модули', ('lsmod',),
                   line_filter=LineFilter(CAMERA_MODULE_PATTERN)),
    DiagnosticStep('Права доступа к камере', ('ls', '-la', '/dev/video*'), expand_globs=True),
    DiagnosticStep('Модель платы', ('cat', '/proc/cpuinfo'),
                   line_filter=LineFilter('Model', ignore_case=False)),
    DiagnosticStep('Версия ОС', ('cat', '/etc/os-release')),
    DiagnosticStep('Версия ядра', ('uname', '-a')),
)

CONDITIONAL_STEPS = (
    DiagnosticStep('Журнал systemd', ('journalctl', '-b'),
                   line_filter=LineFilter(CAMERA_LOG_PATTERN, tail=LOG_TAIL_LINES),
                   requires_tool='journalctl'),
    DiagnosticStep('Конфигурация ядра',
                   ('grep', '-i', '-E', KERNEL_CONFIG_PATTERN, '{kernel_config}'),
                   requires_file='{kernel_config}'),
    DiagnosticStep('Настройки камеры Raspberry Pi',
                   ('grep', '-i', '-E', BOOT_CONFIG_PATTERN, '{boot_config}'),
                   requires_file='{boot_config}'),
    DiagnosticStep('Настройки камеры Raspberry Pi (firmware)',
                   ('grep', '-i', '-E', BOOT_CONFIG_PATTERN, '{firmware_config}'),
                   requires_file='{firmware_config}'),
)
