"""
Logi przebiegu testów — konsola + plik logs/run_YYYYmmdd_HHMMSS.log.
Pełne tracebacki oblanych testów dopisywane do tego samego pliku.
"""
import logging
import traceback
from datetime import datetime
from pathlib import Path

from schatkamer import settings

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(message)s'
DATE_FORMAT = '%H:%M:%S'

logger = logging.getLogger(__name__)


class RunLog:
    def __init__(self, log_dir: Path | None = None):
        self.log_dir = Path(log_dir or settings.LOGS_DIR)
        self.log_file: Path | None = None
        self.log_handler: logging.Handler | None = None

    def setup(self, level: int = logging.INFO) -> Path:
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = self.log_dir / f"run_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

        self.log_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        self.log_handler.setLevel(logging.DEBUG)
        self.log_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

        root = logging.getLogger()
        root.addHandler(self.log_handler)
        if root.level > level or root.level == logging.NOTSET:
            root.setLevel(level)

        logger.info(f"Log przebiegu: {self.log_file}")
        return self.log_file

    def write_raw_traceback(self, test_name: str, exception: BaseException):
        if not self.log_file:
            return
        try:
            tb_lines = traceback.format_exception(type(exception), exception, exception.__traceback__)
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write('=' * 80 + '\n')
                f.write(f'ERROR in test: {test_name}\n')
                f.write('=' * 80 + '\n')
                f.write(''.join(tb_lines))
                f.write('=' * 80 + '\n\n')
        except Exception as e:
            logger.error(f"Failed to write traceback: {e}")

    def close(self):
        if self.log_handler:
            logging.getLogger().removeHandler(self.log_handler)
            self.log_handler.close()
            self.log_handler = None
