"""
camera_diag - сбор диагностики камер V4L2/UVC на одноплатных компьютерах
"""

__version__ = "1.0.0"
