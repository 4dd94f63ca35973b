import logging

class LevelColorFormatter(logging.Formatter):
    # ANSI color codes
    COLORS = {
        logging.DEBUG: '\033[36m',    # Cyan
        logging.INFO: '\033[32m',     # Green
        logging.WARNING: '\033[33m',  # Yellow
        logging.ERROR: '\033[31m',    # Red
        logging.CRITICAL: '\033[31m', # Red (same as error)
    }
    RESET = '\033[0m'

    def __init__(self, fmt=None, datefmt=None, use_color=True):
        super().__init__(fmt, datefmt)
        self.use_color = use_color
        self._inner = logging.Formatter('[%(asctime)s] [%(level_char)s] %(message)s', datefmt=datefmt)

    def format(self, record):
        level_char = record.levelname[0]
        if self.use_color:
            color = self.COLORS.get(record.levelno, '')
            level_char = f"{color}{level_char}{self.RESET}"
        record.level_char = level_char
        return self._inner.format(record)

handler = logging.StreamHandler()
handler.setFormatter(LevelColorFormatter(datefmt='%H:%M:%S', use_color=handler.stream.isatty()))

logger = logging.getLogger("embedfile")
logger.setLevel(logging.INFO)
logger.handlers.clear()
logger.addHandler(handler)
logger.propagate = False
