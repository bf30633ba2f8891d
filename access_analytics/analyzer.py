"""Access Analytics - Core analysis engine"""

import logging
import os
from collections import Counter
from contextlib import ExitStack
from typing import Callable, IO, Iterable, Iterator, List, Optional, Pattern, Union

from rich.progress import Progress, SpinnerColumn, TextColumn

from .config import LogAnalyzerConfig
from .decoder import decode_line
from .errors import (
    ConfigRequiredError,
    LineRegexRequiredError,
    RankOutOfRangeError,
    SourceUnavailableError,
)
from .models import LogAnalytics, LogLine
from .patterns import FIELD_NAMES

logger = logging.getLogger(__name__)

Source = Union[str, bytes, os.PathLike, IO[str]]
SkipCallback = Callable[[int, str], None]


def _read_stream(stream: Iterable[str], name: str) -> Iterator[str]:
    # Only failures of the stream itself become SourceUnavailableError
    lines = iter(stream)
    while True:
        try:
            line = next(lines)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceUnavailableError(
                "error reading file", context={'path': name}
            ) from exc
        yield line


def read_log_lines(
    lines: Iterable[str],
    line_regex: Pattern,
    on_skip: Optional[SkipCallback] = None,
    counts: Optional[Counter] = None,
) -> Iterator[LogLine]:
    """Decode ``lines`` lazily, dropping the ones the regex does not match.

    ``counts`` (when given) receives ``total`` and ``skipped`` tallies.
    """
    for line_num, raw in enumerate(lines, 1):
        line = raw.rstrip('\r\n')
        if counts is not None:
            counts['total'] += 1
        entry = decode_line(line_regex, line)
        if entry is None:
            if counts is not None:
                counts['skipped'] += 1
            logger.debug("Skipping line %d: no match", line_num)
            if on_skip is not None:
                on_skip(line_num, line)
            continue
        yield entry


def rank(stats: Counter, count: int, clamp: bool = False, name: str = 'keys') -> List[str]:
    """Return the ``count`` most frequent keys of ``stats``.

    Ties keep first-seen order. Asking for more keys than ``stats`` holds
    raises ``RankOutOfRangeError`` unless ``clamp`` is set.
    """
    if count <= 0:
        return []
    if count > len(stats) and not clamp:
        raise RankOutOfRangeError(
            context={'dimension': name, 'requested': count, 'available': len(stats)}
        )
    return [key for key, _ in stats.most_common(count)]


class LogAnalyzer:
    """Counts client addresses and requested URLs across an access log"""

    def __init__(self, config: Optional[LogAnalyzerConfig], console=None):
        if config is None:
            raise ConfigRequiredError()
        if config.line_regex is None:
            raise LineRegexRequiredError()
        missing = [name for name in FIELD_NAMES if name not in config.line_regex.groupindex]
        if missing:
            logger.debug("Line regex has no group for: %s", ", ".join(missing))
        self.config = config
        self.console = console

    @property
    def line_regex(self) -> Pattern:
        return self.config.line_regex

    def analyze(self, source: Source, on_skip: Optional[SkipCallback] = None) -> LogAnalytics:
        """Analyze a log file path or an open text stream.

        Files opened here are closed before returning; streams passed in are
        left open for the caller.
        """
        with ExitStack() as stack:
            if isinstance(source, (str, bytes, os.PathLike)):
                name = os.fsdecode(source)
                try:
                    stream = stack.enter_context(
                        open(source, 'r', encoding=self.config.encoding, errors='replace')
                    )
                except OSError as exc:
                    raise SourceUnavailableError(context={'path': name}) from exc
            else:
                stream = source
                name = str(getattr(source, 'name', '<stream>'))

            return self.analyze_lines(_read_stream(stream, name), on_skip=on_skip, name=name)

    def analyze_lines(
        self,
        lines: Iterable[str],
        on_skip: Optional[SkipCallback] = None,
        name: str = '<lines>',
    ) -> LogAnalytics:
        counts: Counter = Counter()
        entries = read_log_lines(lines, self.line_regex, on_skip=on_skip, counts=counts)

        if self.console:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=self.console,
                transient=True,
            ) as progress:
                task = progress.add_task("Analyzing logs...", total=None)
                analytics = self.aggregate(self._advance(entries, progress, task))
        else:
            analytics = self.aggregate(entries)

        analytics.total_lines = counts['total']
        analytics.skipped_lines = counts['skipped']
        logger.info(
            "Analyzed %s: %d lines, %d skipped, %d unique IPs",
            name, analytics.total_lines, analytics.skipped_lines, analytics.unique_ip_count,
        )
        return analytics

    def aggregate(self, entries: Iterable[LogLine]) -> LogAnalytics:
        """Fold decoded lines into frequency tables and rank them."""
        ip_stats: Counter = Counter()
        url_stats: Counter = Counter()
        for entry in entries:
            ip_stats[entry.remote_host] += 1
            url_stats[entry.url] += 1

        clamp = self.config.clamp_rankings
        return LogAnalytics(
            unique_ip_count=len(ip_stats),
            most_active_ips=rank(ip_stats, self.config.most_active_ips_count, clamp, 'ips'),
            most_visited_urls=rank(url_stats, self.config.most_visited_urls_count, clamp, 'urls'),
        )

    @staticmethod
    def _advance(entries: Iterable[LogLine], progress: Progress, task) -> Iterator[LogLine]:
        for entry in entries:
            progress.update(task, advance=1)
            yield entry
