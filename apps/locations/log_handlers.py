"""
Logging handlers for the location tracker
"""
import logging
import os
from datetime import date


class DailyFileHandler(logging.FileHandler):
    """
    Append log records to ``<directory>/<prefix>_YYYY-MM-DD.log``.

    The target file is re-evaluated on every record, so the first record
    written after midnight opens the new day's file.
    """

    def __init__(self, directory, prefix='api', encoding='utf-8'):
        self.directory = os.fspath(directory)
        self.prefix = prefix
        self.current_day = date.today()
        os.makedirs(self.directory, exist_ok=True)
        super().__init__(self._path_for(self.current_day), mode='a', encoding=encoding, delay=True)

    def _path_for(self, day):
        return os.path.join(self.directory, f"{self.prefix}_{day.isoformat()}.log")

    def emit(self, record):
        today = date.today()
        if today != self.current_day:
            self.acquire()
            try:
                if self.stream:
                    self.stream.close()
                    self.stream = None
                self.current_day = today
                self.baseFilename = os.path.abspath(self._path_for(today))
            finally:
                self.release()
        super().emit(record)
