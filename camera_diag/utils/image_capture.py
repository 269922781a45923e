#!/usr/bin/env python3
"""
Модуль для захвата тестового снимка через v4l2-ctl
"""

import math
from dataclasses import dataclass
from pathlib import Path
from typing import List

from ..config.defaults import REQUIRED_TOOL


@dataclass
class CaptureResult:
    """Результат захвата снимка"""
    path: Path
    size: int
    success: bool


def format_size(num_bytes: int) -> str:
    """
    Размер в стиле `du -h`

    Ниже 10 единиц - один знак после запятой с округлением вверх (2.0M),
    от 10 - целое с округлением вверх (15M).
    """
    if num_bytes < 1024:
        return str(num_bytes)

    units = ('K', 'M', 'G', 'T', 'P')
    value = float(num_bytes)
    for index, unit in enumerate(units):
        value /= 1024
        if value < 10:
            rounded = math.ceil(value * 10) / 10
            if rounded < 10:
                return f"{rounded:.1f}{unit}"
        rounded = math.ceil(value)
        # После округления вверх 1024 единиц - это уже следующая единица
        if rounded < 1024 or index == len(units) - 1:
            return f"{rounded}{unit}"


class SnapshotCapture:
    """Класс для захвата одного кадра с камеры в файл"""

    def __init__(self, context, runner, capture_settings):
        """
        Инициализация захвата

        Args:
            context: RunContext (устройство и путь снимка)
            runner: CommandRunner для выполнения и записи вывода
            capture_settings: CaptureSettings (размер, формат, кадры)
        """
        self.context = context
        self.runner = runner
        self.logger = runner.logger
        self.settings = capture_settings

    def build_command(self) -> List[str]:
        """Команда v4l2-ctl для захвата кадра"""
        fmt = (f"width={self.settings.width},height={self.settings.height},"
               f"pixelformat={self.settings.pixel_format}")
        return [
            REQUIRED_TOOL,
            '--device', self.context.device,
            f'--set-fmt-video={fmt}',
            '--stream-mmap',
            f'--stream-to={self.context.snapshot_path}',
            f'--stream-count={self.settings.frame_count}',
        ]

    def capture(self) -> CaptureResult:
        """Захват снимка и проверка файла на диске"""
        label = f"{self.settings.width}x{self.settings.height} {self.settings.pixel_format}"
        self.runner.run(f"Снимок {label}", self.build_command())

        path = Path(self.context.snapshot_path)
        if not path.is_file():
            self.logger.error(f"❌ Не удалось сделать снимок {label}")
            return CaptureResult(path, 0, False)

        size = path.stat().st_size
        if size == 0:
            self.logger.error(f"❌ Не удалось сделать снимок {label}: пустой файл {path}")
            return CaptureResult(path, 0, False)

        self.logger.success(f"✅ Снимок {label} сохранен в {path} (Размер: {format_size(size)})")
        return CaptureResult(path, size, True)
