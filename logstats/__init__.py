"""Log Stats package"""

from .patterns import VERSION
from .models import ExtractionResult, LineCollection, LogSummary
from .extractors import extract_ip_addresses, extract_url, extract_fields
from .aggregate import frequency_table, top_entries, top_values, unique_count
from .sink import UnmatchedLineSink
from .analyzer import LogAnalyzer, get_file_extension, is_valid_extension
from .inputs import resolve_input_path, check_access
from .output import print_report, report_json

__all__ = [
    'VERSION', 'ExtractionResult', 'LineCollection', 'LogSummary',
    'extract_ip_addresses', 'extract_url', 'extract_fields',
    'frequency_table', 'top_entries', 'top_values', 'unique_count',
    'UnmatchedLineSink', 'LogAnalyzer', 'get_file_extension', 'is_valid_extension',
    'resolve_input_path', 'check_access', 'print_report', 'report_json',
]
