"""Log Stats - Core analysis engine"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO

from rich.progress import Progress, SpinnerColumn, TextColumn

from .aggregate import top_entries, unique_count
from .extractors import extract_fields
from .models import LineCollection, LogSummary
from .patterns import DEFAULT_TOP, VALID_EXTENSIONS
from .sink import UnmatchedLineSink

log = logging.getLogger(__name__)


def get_file_extension(filepath: str) -> str:
    # Last dot of the file name, so a bare ".log" counts as an extension
    name = Path(filepath).name
    dot = name.rfind('.')
    if dot == -1:
        return ''
    return name[dot:].lower()


def is_valid_extension(file_ext: str) -> bool:
    return file_ext in VALID_EXTENSIONS


def read_lines(f: TextIO) -> Iterator[str]:
    for line in f:
        yield line.rstrip('\n')


class LogAnalyzer:
    """Extracts IPs and URLs line by line and ranks them"""

    def __init__(self, sink=None, top: int = DEFAULT_TOP, console=None):
        self.sink = sink if sink is not None else UnmatchedLineSink()
        self.top = top
        self.console = console

    def collect(self, lines: Iterable[str]) -> LineCollection:
        """Fold the lines into IP and URL collections.

        Every line contributes one URL slot (``None`` when absent). Lines
        without an IP address go to the sink instead of the IP list.
        """
        collected = LineCollection()
        for line in lines:
            result = extract_fields(line)
            collected.urls.append(result.url)
            if result.matched:
                collected.ips.extend(result.ips)
            else:
                collected.unmatched += 1
                self.sink.append(line)
            collected.line_count += 1
        return collected

    def summarize(self, filepath: str, collected: LineCollection) -> LogSummary:
        # Absent URLs take no ranking slot
        present_urls = [url for url in collected.urls if url is not None]
        return LogSummary(
            filepath=filepath,
            total_lines=collected.line_count,
            total_ips=len(collected.ips),
            unmatched_lines=collected.unmatched,
            unique_ips=unique_count(collected.ips),
            top_ip_counts=top_entries(collected.ips, self.top),
            top_url_counts=top_entries(present_urls, self.top),
        )

    def analyze_lines(self, lines: Iterable[str], source: str = '<lines>') -> Optional[LogSummary]:
        collected = self.collect(lines)
        if collected.line_count == 0:
            log.error("File is empty: %s", source)
            return None

        summary = self.summarize(source, collected)
        log.info("Number of unique IP addresses: %d", summary.unique_ips)
        log.info("Top %d IP addresses: %s", self.top, ', '.join(summary.top_ips))
        log.info("Top %d most visited URLs: %s", self.top, ', '.join(summary.top_urls))
        log.info("Processing completed.")
        return summary

    def analyze_file(self, filepath: str) -> Optional[LogSummary]:
        file_ext = get_file_extension(filepath)
        if not is_valid_extension(file_ext):
            log.error("Invalid file extension: %s", file_ext)
            return None

        try:
            with open(filepath, 'r', encoding='utf-8', errors='replace') as f:
                if self.console:
                    return self._analyze_with_progress(read_lines(f), filepath)
                return self.analyze_lines(read_lines(f), filepath)
        except OSError as e:
            log.error("Error occurred while reading the file: %s", e)
            return None

    def _analyze_with_progress(self, lines: Iterator[str], filepath: str) -> Optional[LogSummary]:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True
        ) as progress:
            task = progress.add_task("Analyzing logs...", total=None)

            def tracked():
                for line in lines:
                    yield line
                    progress.update(task, advance=1)

            return self.analyze_lines(tracked(), filepath)
