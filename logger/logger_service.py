import logging

MIN_APP_LOGLEVEL = 'WARNING'

# ANSI color codes
COLORS = {
    'RESET': '\033[0m',
    'RED': '\033[31m',
    'GREEN': '\033[32m',
    'YELLOW': '\033[33m',
    'BLUE': '\033[34m',
    'MAGENTA': '\033[35m',
    'CYAN': '\033[36m',
    'DEEP_RED': '\033[38;5;196m',  # Brighter red for critical
    'ORANGE': '\033[38;5;208m',    # Orange for warning
    'PURPLE': '\033[38;5;99m',     # Purple for debug
}

# Colors cycled through for different logger names
LOGGER_COLORS = [COLORS['GREEN'], COLORS['BLUE'], COLORS['MAGENTA'],
                 COLORS['CYAN'], COLORS['YELLOW']]

# Colors for different log levels
LEVEL_COLORS = {
    'DEBUG': COLORS['PURPLE'],
    'INFO': COLORS['GREEN'],
    'WARNING': COLORS['ORANGE'],
    'ERROR': COLORS['RED'],
    'CRITICAL': COLORS['DEEP_RED']
}

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}


class ColoredFormatter(logging.Formatter):
    def __init__(self, fmt=None, datefmt=None):
        super().__init__(fmt, datefmt)
        self.logger_colors = {}
        self.color_index = 0

    def format(self, record):
        if record.name not in self.logger_colors:
            self.logger_colors[record.name] = LOGGER_COLORS[self.color_index]
            self.color_index = (self.color_index + 1) % len(LOGGER_COLORS)

        # Color a copy so other handlers still see the plain record
        record = logging.makeLogRecord(record.__dict__)
        record.name = f"{self.logger_colors[record.name]}{record.name}{COLORS['RESET']}"
        level_color = LEVEL_COLORS.get(record.levelname, COLORS['RESET'])
        record.levelname = f"{level_color}{record.levelname}{COLORS['RESET']}"

        return super().format(record)


log_format = '%(asctime)s.%(msecs)03d [%(levelname)s:%(name)s]: %(message)s File "%(pathname)s", line %(lineno)d'
date_format = r'%Y-%m-%d %H:%M:%S'

file_formatter = logging.Formatter(fmt=log_format, datefmt=date_format)
console_formatter = ColoredFormatter(fmt=log_format, datefmt=date_format)


def get_logger(name):
    return logging.getLogger(name)


def configure_logging(level=MIN_APP_LOGLEVEL, log_file=None):
    """
    Install a colored console handler (and optionally a plain file handler) on the
    root logger, replacing whatever handlers it had.

    Args:
        level: one of the names in LEVELS
        log_file: optional path of a log file opened in append mode

    Returns:
        the root logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(LEVELS[level.upper()])
    root_logger.handlers = []  # Clear existing handlers

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    return root_logger
