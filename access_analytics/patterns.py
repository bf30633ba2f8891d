"""Access Analytics - Constants and patterns"""

import re
from datetime import datetime, timezone

VERSION = "1.0.0"

# Timestamp layout of common/combined logs, e.g. 10/Jul/2018:22:21:28 -0700
TIMESTAMP_FORMAT = "%d/%b/%Y:%H:%M:%S %z"

# Bound to LogLine.time when the timestamp field does not parse
ZERO_TIME = datetime.min.replace(tzinfo=timezone.utc)

# Groups the decoder binds a LogLine from
FIELD_NAMES = (
    'remote_host', 'time', 'method', 'url', 'protocol', 'alt_url',
    'status', 'bytes', 'referer', 'user_agent',
)

_QUOTED = r'(?:\\"|[^"])*'

DEFAULT_LINE_PATTERN = ''.join([
    r'^(?P<remote_host>\S+)\s',                  # client address
    r'\S+\s+',                                   # remote logname
    r'(?:\S+\s+)+',                              # remote user
    r'\[(?P<time>[^\]]+)\]\s',                   # timestamp
    r'"(?P<method>\S*)\s?',                      # method
    r'(?:(?P<url>' + _QUOTED + r')\s',           # URL
    r'(?P<protocol>[^"\s]*)"\s|',                # protocol
    r'(?P<alt_url>' + _QUOTED + r')"\s)',        # or a URL with no protocol
    r'(?P<status>\S+)\s',                        # status code
    r'(?P<bytes>\S+)\s',                         # bytes
    r'"(?P<referer>' + _QUOTED + r')"\s',        # referrer
    r'"(?P<user_agent>.*)"$',                    # user agent
])

DEFAULT_LINE_REGEX = re.compile(DEFAULT_LINE_PATTERN)
