"""Access Analytics - Line decoder

Turns one raw access log line into a :class:`LogLine` by applying a regex
with named groups (see ``patterns.FIELD_NAMES``). Lines the regex does not
match decode to ``None``; malformed numeric or time fields decode to zero
values instead of failing the line.
"""

import re
from datetime import datetime
from typing import Optional, Pattern

from .models import LogLine
from .patterns import TIMESTAMP_FORMAT, ZERO_TIME

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_timestamp(value: str) -> datetime:
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        return ZERO_TIME


def parse_int(value: str) -> int:
    # ASCII digits only; int() would also take "1_000" and non-ASCII digits
    if not _INTEGER.fullmatch(value):
        return 0
    return int(value)


def resolve_url(url: str, alt_url: str) -> str:
    """Prefer the URL captured next to a protocol, fall back to the bare one."""
    if url == '' and alt_url != '':
        return alt_url
    return url


def decode_line(line_regex: Pattern, line: str) -> Optional[LogLine]:
    match = line_regex.search(line)
    if not match:
        return None

    groups = {name: value or '' for name, value in match.groupdict().items()}
    url = groups.get('url', '')

    return LogLine(
        remote_host=groups.get('remote_host', ''),
        time=parse_timestamp(groups.get('time', '')),
        request=f"{groups.get('method', '')} {url} {groups.get('protocol', '')}",
        status=parse_int(groups.get('status', '')),
        bytes=parse_int(groups.get('bytes', '')),
        referer=groups.get('referer', ''),
        user_agent=groups.get('user_agent', ''),
        url=resolve_url(url, groups.get('alt_url', '')),
    )
