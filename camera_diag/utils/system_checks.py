#!/usr/bin/env python3
"""
Проверки наличия утилит и файлов перед запуском шагов
"""

import shutil
from pathlib import Path

from ..config.defaults import get_install_hint


class MissingToolError(RuntimeError):
    """Обязательная утилита не найдена в PATH"""

    def __init__(self, tool: str, hint: str):
        super().__init__(f"{tool} не найден. Установите: {hint}")
        self.tool = tool
        self.hint = hint


def tool_available(name: str) -> bool:
    """Проверка наличия утилиты в PATH"""
    return shutil.which(name) is not None


def file_exists(path: str) -> bool:
    """Проверка наличия обычного файла"""
    return Path(path).is_file()


def ensure_tool_available(name: str):
    """
    Проверка обязательной утилиты

    Raises:
        MissingToolError: утилита не найдена
    """
    if not tool_available(name):
        raise MissingToolError(name, get_install_hint(name))


def guard_passes(step) -> bool:
    """Условие запуска шага (проверяется каждый раз, без кэша)"""
    if step.requires_tool and not tool_available(step.requires_tool):
        return False
    if step.requires_file and not file_exists(step.requires_file):
        return False
    return True
