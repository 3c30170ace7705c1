"""
Resource path utility module
리소스 경로 유틸리티 모듈
"""

import os
import sys


# text_on_image/ 디렉토리 (main.py 및 fonts/ 폴더 위치)
# The text_on_image/ directory holding main.py and the optional fonts/ folder
SOURCE_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def resource_path(relative_path):
    """
    Get resource path compatible with PyInstaller
    PyInstaller와 호환되는 리소스 경로 반환

    Lookup order: PyInstaller bundle, current directory, source directory.
    조회 순서: PyInstaller 번들, 현재 디렉토리, 소스 디렉토리.

    Args / 인자:
        relative_path (str): Relative path to resource file / 리소스 파일의 상대 경로

    Returns / 반환값:
        str: Absolute path to resource file / 리소스 파일의 절대 경로
    """
    if os.path.isabs(relative_path):
        return relative_path
    if hasattr(sys, '_MEIPASS'):
        # Running as PyInstaller bundle / PyInstaller 번들로 실행 중
        return os.path.join(sys._MEIPASS, relative_path)
    # Running as script / 스크립트로 실행 중
    cwd_path = os.path.join(os.path.abspath("."), relative_path)
    if os.path.exists(cwd_path):
        return cwd_path
    return os.path.join(SOURCE_ROOT, relative_path)
