#!/usr/bin/env python3
"""
Утилита для формирования имен файлов запуска на основе YAML конфигурации
"""

import os
import string
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_NAMING_CONFIG = Path(__file__).resolve().parent.parent / 'config' / 'file_naming.yaml'


class FileNamer:
    """Класс для генерации имен файлов по шаблону из YAML конфигурации"""

    REQUIRED_KEYS = ('timestamp_format', 'host_separator', 'main_log_format',
                     'output_log_format', 'snapshot_format')

    # Допустимые переменные в шаблонах имен
    TEMPLATE_FIELDS = {
        'main_log_format': {'stamp'},
        'output_log_format': {'stamp'},
        'snapshot_format': {'stamp', 'extension'},
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Инициализация FileNamer

        Args:
            config_path: Путь к YAML конфигурационному файлу
                         (по умолчанию config/file_naming.yaml пакета)
        """
        self.config_path = str(config_path) if config_path else str(DEFAULT_NAMING_CONFIG)
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Загрузка конфигурации из YAML файла"""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except FileNotFoundError:
            print(f"⚠️  Конфигурационный файл не найден: {self.config_path}")
            print("   Используются настройки по умолчанию")
            return self._get_default_config()
        except yaml.YAMLError as e:
            print(f"❌ Ошибка чтения YAML конфигурации: {e}")
            return self._get_default_config()

        if not isinstance(config, dict):
            print(f"❌ Ожидался словарь в {self.config_path}")
            return self._get_default_config()

        # Недостающие ключи дополняем значениями по умолчанию
        merged = self._get_default_config()
        merged.update(config)
        return merged

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return {
            'timestamp_format': '%Y%m%d_%H%M%S',
            'host_separator': '_',
            'main_log_format': 'camera_diagnostic_{stamp}.log',
            'output_log_format': 'output_{stamp}.log',
            'snapshot_format': 'snap_{stamp}.{extension}',
        }

    def format_timestamp(self, moment: datetime) -> str:
        """Метка времени для имен файлов"""
        return moment.strftime(self.config['timestamp_format'])

    def make_stamp(self, timestamp: str, host: Optional[str] = None) -> str:
        """Метка запуска: <timestamp> или <host>_<timestamp>"""
        if host:
            return f"{host}{self.config['host_separator']}{timestamp}"
        return timestamp

    def main_log_name(self, stamp: str) -> str:
        """Имя основного лога"""
        return self.config['main_log_format'].format(stamp=stamp)

    def output_log_name(self, stamp: str) -> str:
        """Имя лога сырого вывода команд"""
        return self.config['output_log_format'].format(stamp=stamp)

    def snapshot_name(self, stamp: str, extension: str) -> str:
        """Имя файла снимка"""
        return self.config['snapshot_format'].format(stamp=stamp, extension=extension)

    def get_config_info(self) -> Dict[str, Any]:
        """Получение информации о текущей конфигурации"""
        return {key: self.config[key] for key in self.REQUIRED_KEYS}

    def validate_config(self) -> bool:
        """Проверка валидности конфигурации"""
        for key in self.REQUIRED_KEYS:
            if key not in self.config:
                print(f"❌ В конфигурации отсутствует обязательный ключ: {key}")
                return False

        for key in ('timestamp_format', 'host_separator'):
            if not isinstance(self.config[key], str):
                print(f"❌ Значение {key} должно быть строкой")
                return False

        for key, allowed in self.TEMPLATE_FIELDS.items():
            fields = self._template_fields(self.config[key])
            if fields is None:
                print(f"❌ Некорректный шаблон {key}: {self.config[key]!r}")
                return False
            unknown = sorted(fields - allowed)
            if unknown:
                print(f"❌ В формате {key} неизвестные переменные: {', '.join(unknown)}")
                return False
            if 'stamp' not in fields:
                print(f"❌ В формате {key} отсутствует переменная: {{stamp}}")
                return False

        if '{extension}' not in self.config['snapshot_format']:
            print("⚠️  В формате snapshot_format отсутствует переменная: {extension}")

        if self.main_log_name('stamp') == self.output_log_name('stamp'):
            print("❌ Основной лог и лог вывода команд получают одинаковое имя")
            return False

        return True

    @staticmethod
    def _template_fields(template: Any) -> Optional[set]:
        """Имена переменных шаблона или None, если шаблон не разбирается"""
        if not isinstance(template, str):
            return None
        try:
            return {field for _, field, _, _ in string.Formatter().parse(template)
                    if field is not None}
        except ValueError:
            return None


def sanitize_host(host: str) -> str:
    """Имя хоста, пригодное для имени файла"""
    cleaned = ''.join(ch if (ch.isascii() and ch.isalnum()) or ch in '._-' else '_' for ch in host.strip())
    return cleaned or 'unknown'


def validate_config(config_path: Optional[str] = None) -> bool:
    """Проверка валидности конфигурации"""
    if config_path and not os.path.exists(config_path):
        print(f"❌ Конфигурационный файл не найден: {config_path}")
        return False
    namer = FileNamer(config_path)
    return namer.validate_config()
