#!/usr/bin/env python3
"""
Парсер аргументов командной строки для camera_diag
"""

import argparse
from typing import Optional, Sequence

from .settings import DiagnosticSettings, load_config_file


class CLIParser:
    """Парсер аргументов командной строки"""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Создание парсера с группами аргументов"""
        parser = argparse.ArgumentParser(
            prog='camera-diag',
            description='Сбор диагностики камеры (V4L2/UVC) в логи и тестовый снимок',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Примеры использования:
  %(prog)s                                        # /dev/video0, снимок 1920x1080 MJPG
  %(prog)s --device /dev/video2                   # другая камера
  %(prog)s --width 1280 --height 720 --pixel-format YUYV
  %(prog)s --with-hostname --log-dir /tmp/diag    # имя хоста в именах файлов
  %(prog)s --config camera_diag.yaml              # настройки из YAML
"""
        )

        # Значения по умолчанию None: незаданный аргумент не перекрывает YAML
        camera_group = parser.add_argument_group('Параметры камеры')
        camera_group.add_argument('--device', type=str, default=None,
                                  help='Устройство камеры (по умолчанию: /dev/video0)')

        capture_group = parser.add_argument_group('Параметры снимка')
        capture_group.add_argument('--width', type=int, default=None,
                                   help='Ширина кадра (по умолчанию: 1920)')
        capture_group.add_argument('--height', type=int, default=None,
                                   help='Высота кадра (по умолчанию: 1080)')
        capture_group.add_argument('--pixel-format', type=str, default=None,
                                   help='Формат пикселей V4L2 (по умолчанию: MJPG)')
        capture_group.add_argument('--frame-count', type=int, default=None,
                                   help='Количество кадров в снимке (по умолчанию: 1)')

        paths_group = parser.add_argument_group('Пути')
        paths_group.add_argument('--log-dir', type=str, default=None,
                                 help='Директория логов (по умолчанию: ./logs)')
        paths_group.add_argument('--snap-dir', type=str, default=None,
                                 help='Директория снимков (по умолчанию: ./snapshots)')
        paths_group.add_argument('--naming-config', type=str, default=None,
                                 help='YAML с шаблонами имен файлов')

        system_group = parser.add_argument_group('Системные файлы')
        system_group.add_argument('--kernel-config', type=str, default=None,
                                  help='Конфигурация ядра (по умолчанию: /boot/config-$(uname -r))')
        system_group.add_argument('--boot-config', type=str, default=None,
                                  help='config.txt загрузчика (по умолчанию: /boot/config.txt)')
        system_group.add_argument('--firmware-config', type=str, default=None,
                                  help='config.txt прошивки (по умолчанию: /boot/firmware/config.txt)')

        output_group = parser.add_argument_group('Вывод')
        output_group.add_argument('--with-hostname', action='store_true', default=None,
                                  dest='include_hostname',
                                  help='Добавлять имя хоста в имена файлов')
        output_group.add_argument('--no-color', action='store_false', default=None,
                                  dest='color',
                                  help='Отключить цветной вывод в терминал')
        output_group.add_argument('--config', type=str, default=None,
                                  help='YAML файл с настройками')

        return parser

    def parse_args(self, argv: Optional[Sequence[str]] = None) -> DiagnosticSettings:
        """Парсинг аргументов и создание настроек"""
        args = self.parser.parse_args(argv)
        file_config = load_config_file(args.config) if args.config else None
        return DiagnosticSettings.from_args(args, file_config)


def create_cli_parser() -> CLIParser:
    """Создание экземпляра парсера"""
    return CLIParser()


def parse_arguments(argv: Optional[Sequence[str]] = None) -> DiagnosticSettings:
    """Парсинг аргументов командной строки"""
    parser = create_cli_parser()
    return parser.parse_args(argv)
