"""Log Stats - Input file resolution"""

import logging
import os
from typing import Callable, Optional

from .patterns import DEFAULT_LOG_FILE

log = logging.getLogger(__name__)

PROMPT = 'Please enter a file path: '


def resolve_input_path(path: Optional[str] = None, prompt: Optional[Callable[[str], str]] = None) -> str:
    """Pick the file to analyze from the argument or by asking the user.

    The answer is stripped; an empty or blank answer, or end of input,
    falls back to DEFAULT_LOG_FILE.
    """
    if path:
        log.info("Using file: %s", path)
        return path

    try:
        answer = (prompt or input)(PROMPT).strip()
    except EOFError:
        answer = ''

    if not answer:
        log.info("Using default file: %s", DEFAULT_LOG_FILE)
        return DEFAULT_LOG_FILE

    log.info("Using file: %s", answer)
    return answer


def check_access(path: str) -> bool:
    if not os.path.exists(path):
        log.error("File not found: %s", path)
        return False
    if not os.path.isfile(path) or not os.access(path, os.R_OK):
        log.error("Error accessing file: %s", path)
        return False
    return True
