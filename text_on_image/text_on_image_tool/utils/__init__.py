"""
Utility module for text on image tool
텍스트 이미지 툴 유틸리티 모듈
"""

from .logger import Logger, logger
from .resource import resource_path
from .exceptions import TextOnImageError, InvalidConfig, FontError, RenderingError
from .settings import Settings, load_settings, save_settings

__all__ = [
    'Logger',
    'logger',
    'resource_path',
    'TextOnImageError',
    'InvalidConfig',
    'FontError',
    'RenderingError',
    'Settings',
    'load_settings',
    'save_settings',
]
