"""Log Stats - Field extractors"""

from typing import List, Optional

from .models import ExtractionResult
from .patterns import IP_PATTERN, METHOD_PATTERN, HTTP_MARKER


def extract_ip_addresses(line: str) -> List[str]:
    return IP_PATTERN.findall(line)


def extract_url(line: str) -> Optional[str]:
    """Return the request path that follows a method keyword.

    The text between the first method keyword and the next one (or the end
    of the line) is cut at `` HTTP`` and its spaces are removed. ``None``
    means the line carries no method keyword at all; an empty string means
    a keyword was found but nothing sat between it and the marker.
    """
    parts = METHOD_PATTERN.split(line)
    if len(parts) < 2:
        return None

    request = parts[1].split(HTTP_MARKER)[0]
    return ''.join(token for token in request.split(' ') if token)


def extract_fields(line: str) -> ExtractionResult:
    return ExtractionResult(
        line=line,
        ips=extract_ip_addresses(line),
        url=extract_url(line),
    )
