"""Utility functions for error handling, logging and display text."""
from typing import Optional
import inspect
import logging
from functools import wraps

from rich.console import Console
from rich.traceback import Traceback
from rich.panel import Panel
from rich.text import Text
from rich.markup import escape
from rich.logging import RichHandler as BaseRichHandler

# Create a rich console for error display
console = Console(stderr=True)


class RichHandler(BaseRichHandler):
    """A logging handler that uses rich for output."""

    def __init__(self, level: int = logging.NOTSET):
        super().__init__(level, console=Console(stderr=True))

    def emit(self, record: logging.LogRecord):
        try:
            location = f"[dim][{record.filename}:{record.lineno}][/]"

            if record.levelno >= logging.ERROR:
                level_style = "bold red"
            elif record.levelno >= logging.WARNING:
                level_style = "yellow"
            elif record.levelno >= logging.INFO:
                level_style = "green"
            else:
                level_style = "blue"

            # Messages are plain text, not rich markup
            msg = escape(record.getMessage())
            self.console.print(f"{location} [{level_style}]{record.levelname}[/] {msg}")

        except Exception:
            self.handleError(record)


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger with the rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, handlers=[RichHandler()], force=True)

    # Silence noisy libraries
    logging.getLogger("PIL").setLevel(logging.WARNING)


def format_error(e: Exception, title: Optional[str] = None, show_locals: bool = False) -> None:
    """Format an exception with rich styling.

    Args:
        e: The exception to format
        title: Optional custom title for the error panel
        show_locals: Whether to show local variables in the traceback
    """
    panel_title = title or f"[red bold]{e.__class__.__name__}[/]"

    tb = Traceback.from_exception(
        type(e),
        e,
        e.__traceback__,
        show_locals=show_locals,
        width=100,
        extra_lines=1,
        theme="monokai",
        word_wrap=True
    )

    error_panel = Panel(
        Text(get_message_from_exception(e)),
        title=panel_title,
        border_style="red",
        padding=(1, 2)
    )

    console.print(error_panel)
    console.print(tb)


def handle_exceptions(logger=None, show_locals=False):
    """Decorator for consistent exception handling.

    Logs and displays the error, then re-raises it. Works on both plain
    and async functions.

    Args:
        logger: Optional logger instance to use
        show_locals: Whether to show local variables in traceback
    """
    def report(e: Exception):
        if logger:
            logger.error(get_message_from_exception(e))
        format_error(e, show_locals=show_locals)

    def decorator(func):
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    report(e)
                    raise
            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                report(e)
                raise
        return wrapper
    return decorator


def get_message_from_exception(ex: Exception) -> str:
    """Best human-readable message for an exception.

    Service client errors carry a more useful text than str(ex): an
    ``error_message`` attribute, or an ``error`` object with a ``message``.
    The nested error message wins when both are present.
    """
    details = str(ex)

    error_message = getattr(ex, 'error_message', None)
    if error_message is not None:
        details = error_message

    error = getattr(ex, 'error', None)
    nested_message = getattr(error, 'message', None)
    if nested_message is not None:
        details = nested_message

    return details


def capitalize_string(s: str) -> str:
    """Upper-case the first letter of every space-separated word."""
    return " ".join(word[0].upper() + word[1:] if word else "" for word in s.split(" "))
