"""
Logger module for text layout and rendering
텍스트 배치 및 렌더링을 위한 로거 모듈
"""

import logging


LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class Logger:
    """
    Logger class for library and command line logging
    라이브러리 및 명령줄 로깅을 위한 로거 클래스

    The library never attaches handlers on import; the command line script
    (or an embedding application) calls setup_logging() to send records to a file.
    라이브러리는 import 시 핸들러를 추가하지 않으며, 명령줄 스크립트(또는 사용하는
    애플리케이션)가 setup_logging()을 호출하여 파일로 기록합니다.
    """

    def __init__(self, name='TextOnImage'):
        """Initialize logger / 로거 초기화"""
        self.log_file = None
        self.logger = logging.getLogger(name)
        self.logger.addHandler(logging.NullHandler())

    def setup_logging(self, log_file="text_on_image.log", level=logging.WARNING):
        """
        Setup file logging
        파일 로깅 설정

        Args / 인자:
            log_file (str): Log file path / 로그 파일 경로
            level (int or str): Minimum level written to the file / 파일에 기록할 최소 레벨

        Returns / 반환값:
            logging.Handler: The attached file handler / 추가된 파일 핸들러
        """
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                level = logging.WARNING

        # 로그 포맷 설정 / Log format configuration
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        # 같은 파일 핸들러가 중복되지 않도록 기존 핸들러 제거
        # Drop a previous file handler so records are not written twice
        self.close()

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)

        self.log_file = log_file
        self.logger.setLevel(level)
        self.logger.addHandler(file_handler)
        return file_handler

    def close(self):
        """Detach and close file handlers / 파일 핸들러 해제"""
        for handler in list(self.logger.handlers):
            if isinstance(handler, logging.FileHandler):
                self.logger.removeHandler(handler)
                handler.close()
        self.log_file = None

    def info(self, message):
        """
        Log info message / 정보 로그 기록
        Args / 인자:
            message (str): Info message / 정보 메시지
        """
        self.logger.info(message)

    def debug(self, message):
        """
        Log debug message / 디버그 로그 기록
        Args / 인자:
            message (str): Debug message / 디버그 메시지
        """
        self.logger.debug(message)

    def warning(self, message):
        """
        Log warning message / 경고 로그 기록
        Args / 인자:
            message (str): Warning message / 경고 메시지
        """
        self.logger.warning(message)

    def error(self, message):
        """
        Log error message / 에러 로그 기록
        Args / 인자:
            message (str): Error message / 에러 메시지
        """
        self.logger.error(message)


# 전역 로거 인스턴스 / Global logger instance
logger = Logger()
