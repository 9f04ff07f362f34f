import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


class ForeignFilter(logging.Filter):
    def filter(self, record):
        return "ucdtools" in record.pathname


def setup_logging(facility, args, name):
    python_minus_m = name == "__main__"
    user_mode = not python_minus_m and not getattr(args, "show_tracebacks", False)

    # Standard output carries the tool's results, so logs go to stderr.
    handler = RichHandler(console=Console(stderr=True))

    if user_mode:
        # Even with --log-level DEBUG, in user mode we only want to see
        # ucdtools-related logs.
        handler.addFilter(ForeignFilter())

    logging.basicConfig(
        level=args.log_level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[handler],
    )

    log = logging.getLogger(facility)

    def user_error_messages(_type, value, _traceback):
        """Print user-friendly error messages to the console when exceptions
        are raised, instead of a traceback."""
        log.fatal(value)

    if user_mode:
        sys.excepthook = user_error_messages

    return log
