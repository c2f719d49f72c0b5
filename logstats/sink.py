"""Log Stats - Unmatched line sink"""

import logging

from .patterns import UNMATCHED_LOG_FILE

log = logging.getLogger(__name__)


class UnmatchedLineSink:
    """Append-only file receiving lines that carried no IP address"""

    def __init__(self, path: str = UNMATCHED_LOG_FILE):
        self.path = path
        self.written = 0

    def append(self, line: str) -> bool:
        try:
            with open(self.path, 'a', encoding='utf-8') as f:
                f.write(line + '\n')
        except OSError as e:
            log.error("Error writing unmatched IP address to file: %s", e)
            return False

        self.written += 1
        log.debug("Unmatched line written to %s", self.path)
        return True
