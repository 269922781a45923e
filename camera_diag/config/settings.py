#!/usr/bin/env python3
"""
Классы настроек для camera_diag
"""

from dataclasses import dataclass
from typing import Optional

import yaml

from .defaults import get_default_settings, get_snapshot_extension

# Ключи YAML, принимающие только true/false
BOOL_KEYS = ('include_hostname', 'color')


@dataclass
class CaptureSettings:
    """Настройки тестового снимка"""
    width: int = 1920
    height: int = 1080
    pixel_format: str = 'MJPG'
    frame_count: int = 1

    @property
    def extension(self) -> str:
        """Расширение файла снимка"""
        return get_snapshot_extension(self.pixel_format)


@dataclass
class PathSettings:
    """Пути для логов и снимков"""
    log_dir: str = './logs'
    snap_dir: str = './snapshots'
    naming_config: Optional[str] = None


@dataclass
class SystemSettings:
    """Устройство камеры и системные файлы"""
    device: str = '/dev/video0'
    kernel_config: str = ''
    boot_config: str = '/boot/config.txt'
    firmware_config: str = '/boot/firmware/config.txt'


@dataclass
class OutputSettings:
    """Настройки вывода"""
    include_hostname: bool = False
    color: bool = True


@dataclass
class DiagnosticSettings:
    """Все настройки диагностики"""
    capture: CaptureSettings
    paths: PathSettings
    system: SystemSettings
    output: OutputSettings

    @classmethod
    def from_dict(cls, values: dict):
        """Создание настроек из плоского словаря (недостающие ключи берутся по умолчанию)"""
        merged = get_default_settings()
        merged.update(values)

        return cls(
            capture=CaptureSettings(
                width=int(merged['width']),
                height=int(merged['height']),
                pixel_format=str(merged['pixel_format']),
                frame_count=int(merged['frame_count'])
            ),
            paths=PathSettings(
                log_dir=str(merged['log_dir']),
                snap_dir=str(merged['snap_dir']),
                naming_config=merged['naming_config']
            ),
            system=SystemSettings(
                device=str(merged['device']),
                kernel_config=str(merged['kernel_config']),
                boot_config=str(merged['boot_config']),
                firmware_config=str(merged['firmware_config'])
            ),
            output=OutputSettings(
                include_hostname=bool(merged['include_hostname']),
                color=bool(merged['color'])
            )
        )

    @classmethod
    def from_args(cls, args, file_config: Optional[dict] = None):
        """
        Создание настроек из аргументов командной строки

        Порядок приоритета: значения по умолчанию <- YAML файл <- аргументы.
        Аргумент со значением None считается не указанным.
        """
        values = dict(file_config or {})
        for key in get_default_settings():
            value = getattr(args, key, None)
            if value is not None:
                values[key] = value
        return cls.from_dict(values)

    def to_dict(self) -> dict:
        """Преобразование в словарь"""
        return {
            'capture': {
                'width': self.capture.width,
                'height': self.capture.height,
                'pixel_format': self.capture.pixel_format,
                'frame_count': self.capture.frame_count
            },
            'paths': {
                'log_dir': self.paths.log_dir,
                'snap_dir': self.paths.snap_dir,
                'naming_config': self.paths.naming_config
            },
            'system': {
                'device': self.system.device,
                'kernel_config': self.system.kernel_config,
                'boot_config': self.system.boot_config,
                'firmware_config': self.system.firmware_config
            },
            'output': {
                'include_hostname': self.output.include_hostname,
                'color': self.output.color
            }
        }


def load_config_file(path: str) -> dict:
    """
    Загрузка плоского YAML файла настроек

    Args:
        path: Путь к YAML файлу

    Returns:
        Словарь с указанными в файле значениями

    Raises:
        FileNotFoundError: файл не найден
        ValueError: файл содержит неизвестные ключи, не является словарем
                    или флаг задан не логическим значением
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Ожидался словарь настроек в {path}")

    unknown = sorted(set(data) - set(get_default_settings()))
    if unknown:
        raise ValueError(f"Неизвестные ключи в {path}: {', '.join(unknown)}")

    for key in BOOL_KEYS:
        if key in data and not isinstance(data[key], bool):
            raise ValueError(f"Значение {key} в {path} должно быть true или false, получено: {data[key]!r}")

    return data
