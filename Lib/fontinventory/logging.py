import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


class ForeignFilter(logging.Filter):
    def filter(self, record):
        return record.name.startswith("fontinventory")


def setup_logging(facility, args, name):
    python_minus_m = name == "__main__"
    user_mode = not python_minus_m and not getattr(args, "show_tracebacks", False)

    # Reports go to stdout, keep log lines on stderr
    handler = RichHandler(console=Console(stderr=True))

    if user_mode:
        # Even with --log-level DEBUG, in user mode we only want to see
        # our own logs, not fontTools' subsetter chatter.
        handler.addFilter(ForeignFilter())

    logging.basicConfig(
        level=getattr(args, "log_level", "INFO"),
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )

    log = logging.getLogger(facility)

    def user_error_messages(_type, value, _traceback):
        """Print a one line error instead of a traceback when a command
        fails on bad input."""
        log.fatal(value)

    if user_mode:
        sys.excepthook = user_error_messages

    return log
