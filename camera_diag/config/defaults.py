#!/usr/bin/env python3
"""
Константы и параметры по умолчанию для camera_diag
"""

import platform

# КАМЕРА
DEFAULT_CAMERA_DEVICE = '/dev/video0'

# ОБЯЗАТЕЛЬНАЯ УТИЛИТА
REQUIRED_TOOL = 'v4l2-ctl'
INSTALL_HINTS = {
    'v4l2-ctl': 'sudo apt install v4l-utils',
}

# ПАРАМЕТРЫ СНИМКА
DEFAULT_CAPTURE_WIDTH = 1920
DEFAULT_CAPTURE_HEIGHT = 1080
DEFAULT_PIXEL_FORMAT = 'MJPG'
DEFAULT_FRAME_COUNT = 1

# Расширение файла снимка по формату пикселей
SNAPSHOT_EXTENSIONS = {
    'MJPG': 'jpg',
    'JPEG': 'jpg',
    'H264': 'h264',
    'YUYV': 'yuv',
    'NV12': 'yuv',
}
DEFAULT_SNAPSHOT_EXTENSION = 'raw'

# ДИРЕКТОРИИ
DEFAULT_LOG_DIR = './logs'
DEFAULT_SNAP_DIR = './snapshots'

# СИСТЕМНЫЕ ФАЙЛЫ
DEFAULT_KERNEL_CONFIG = f'/boot/config-{platform.release()}'
DEFAULT_BOOT_CONFIG = '/boot/config.txt'
DEFAULT_FIRMWARE_CONFIG = '/boot/firmware/config.txt'

# Сколько последних строк журналов сохранять
LOG_TAIL_LINES = 50


def get_snapshot_extension(pixel_format: str) -> str:
    """Расширение файла снимка для формата пикселей"""
    return SNAPSHOT_EXTENSIONS.get(pixel_format.upper(), DEFAULT_SNAPSHOT_EXTENSION)


def get_install_hint(tool: str) -> str:
    """Команда установки для утилиты"""
    return INSTALL_HINTS.get(tool, f'sudo apt install {tool}')


def get_default_settings() -> dict:
    """Получение настроек по умолчанию"""
    return {
        'device': DEFAULT_CAMERA_DEVICE,
        'width': DEFAULT_CAPTURE_WIDTH,
        'height': DEFAULT_CAPTURE_HEIGHT,
        'pixel_format': DEFAULT_PIXEL_FORMAT,
        'frame_count': DEFAULT_FRAME_COUNT,
        'log_dir': DEFAULT_LOG_DIR,
        'snap_dir': DEFAULT_SNAP_DIR,
        'naming_config': None,
        'kernel_config': DEFAULT_KERNEL_CONFIG,
        'boot_config': DEFAULT_BOOT_CONFIG,
        'firmware_config': DEFAULT_FIRMWARE_CONFIG,
        'include_hostname': False,
        'color': True,
    }
