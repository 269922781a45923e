#!/usr/bin/env python3
"""
Контекст одного запуска диагностики: метка времени и все пути вывода
"""

import socket
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

from ..config.settings import DiagnosticSettings
from ..utils.file_namer import FileNamer, sanitize_host


@dataclass(frozen=True)
class RunContext:
    """Неизменяемые параметры запуска"""

    timestamp: str
    started_at: datetime
    host: Optional[str]
    log_dir: Path
    snap_dir: Path
    main_log: Path
    output_log: Path
    snapshot_path: Path
    device: str
    kernel_config: str
    boot_config: str
    firmware_config: str

    def placeholders(self) -> Dict[str, str]:
        """Значения для подстановки в шаблоны диагностических команд"""
        return {
            'device': self.device,
            'kernel_config': self.kernel_config,
            'boot_config': self.boot_config,
            'firmware_config': self.firmware_config,
        }


def create_run_context(settings: DiagnosticSettings,
                       namer: Optional[FileNamer] = None,
                       now: Optional[datetime] = None) -> RunContext:
    """
    Создание контекста запуска

    Args:
        settings: Настройки диагностики
        namer: Генератор имен файлов (по умолчанию из settings.paths.naming_config)
        now: Время запуска (по умолчанию текущее)

    Returns:
        RunContext с путями логов и снимка

    Raises:
        ValueError: шаблоны имен файлов некорректны
    """
    if namer is None:
        namer = FileNamer(settings.paths.naming_config)
    if not namer.validate_config():
        raise ValueError(f"Некорректная конфигурация имен файлов: {namer.config_path}")
    if now is None:
        now = datetime.now()

    timestamp = namer.format_timestamp(now)
    host = sanitize_host(socket.gethostname()) if settings.output.include_hostname else None
    stamp = namer.make_stamp(timestamp, host)

    log_dir = Path(settings.paths.log_dir)
    snap_dir = Path(settings.paths.snap_dir)

    return RunContext(
        timestamp=timestamp,
        started_at=now,
        host=host,
        log_dir=log_dir,
        snap_dir=snap_dir,
        main_log=log_dir / namer.main_log_name(stamp),
        output_log=log_dir / namer.output_log_name(stamp),
        snapshot_path=snap_dir / namer.snapshot_name(stamp, settings.capture.extension),
        device=settings.system.device,
        kernel_config=settings.system.kernel_config,
        boot_config=settings.system.boot_config,
        firmware_config=settings.system.firmware_config,
    )


def ensure_directories(context: RunContext):
    """Создание директорий логов и снимков если не существуют"""
    context.log_dir.mkdir(parents=True, exist_ok=True)
    context.snap_dir.mkdir(parents=True, exist_ok=True)
