"""Log Stats - Constants and patterns"""

import re

VERSION = "1.0.0"

# Dotted quad, syntactic only (no octet range check)
IP_PATTERN = re.compile(r'\b(?:\d{1,3}\.){3}\d{1,3}\b', re.ASCII)

# Request method keywords that precede the URL
METHOD_PATTERN = re.compile(r'GET|PUT|POST|DELETE')

HTTP_MARKER = ' HTTP'

VALID_EXTENSIONS = ('.log',)

DEFAULT_LOG_FILE = 'file.log'
UNMATCHED_LOG_FILE = 'unmatchedIPs.log'

DEFAULT_TOP = 3
