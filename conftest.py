import logging
from collections import OrderedDict

import structlog

# XXX: events go through the stdlib loggers and are filtered by their level, so debug events are not written to stdout
#      where doctests would see them, tests that assert on events use `structlog.testing.capture_logs`
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer(colors=False),
    ],
    context_class=OrderedDict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
)

logging.getLogger('borsh_codec').setLevel(logging.INFO)
