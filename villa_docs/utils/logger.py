"""
Logging utility for the Villa Claudia document portal.
"""
import logging
import sys
from typing import Optional
from colorama import Fore, Style, init
import structlog

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class ColorizedFormatter(logging.Formatter):
    """Custom formatter with colorized output."""

    COLORS = {
        'DEBUG': Fore.CYAN,
        'INFO': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.MAGENTA + Style.BRIGHT,
    }

    def format(self, record):
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{Style.RESET_ALL}"

        if record.levelno >= logging.WARNING:
            record.msg = f"{Fore.RED}{record.msg}{Style.RESET_ALL}"

        return super().format(record)


def setup_logger(
    name: str = "villa_docs",
    level: str = "INFO",
    log_file: Optional[str] = None
) -> structlog.BoundLogger:
    """
    Set up structured logging with colorized console output.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging to file

    Returns:
        Configured structured logger
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if log_file else structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger(name)

    stdlib_logger = logging.getLogger(name)
    stdlib_logger.setLevel(getattr(logging, level.upper()))

    # Avoid stacking handlers when the app factory runs more than once
    if not stdlib_logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(ColorizedFormatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        stdlib_logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            stdlib_logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "villa_docs") -> structlog.BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name

    Returns:
        Configured structured logger
    """
    return structlog.get_logger(name)


class ReminderLogger:
    """Logger for reminder runs with summary tracking."""

    def __init__(self, logger: structlog.BoundLogger):
        self.logger = logger
        self.reset_stats()

    def log_booking_checked(self, booking_id: str, selected: bool):
        self.stats['bookings_checked'] += 1
        if selected:
            self.stats['bookings_selected'] += 1
        self.logger.debug("booking_checked", booking_id=booking_id, selected=selected)

    def log_reminder_sent(self, booking_id: str, guest_email: Optional[str]):
        self.stats['reminders_sent'] += 1
        self.logger.info("reminder_sent", booking_id=booking_id, guest_email=guest_email)

    def log_reminder_failed(self, booking_id: str, error: str = ""):
        self.stats['reminders_failed'] += 1
        self.logger.error("reminder_failed", booking_id=booking_id, error=error)

    def log_error(self, error: Exception, context: str = ""):
        self.stats['errors'] += 1
        self.logger.error(
            "Error occurred",
            error=str(error),
            error_type=type(error).__name__,
            context=context
        )

    def print_summary(self):
        """Print a summary of the run."""
        self.logger.info("Reminder summary", **self.stats)

        print(f"\n{Fore.CYAN}{'='*50}")
        print(f"{Fore.WHITE}DOCUMENT REMINDER SUMMARY")
        print(f"{Fore.CYAN}{'='*50}")
        print(f"{Fore.GREEN}✓ Bookings checked: {self.stats['bookings_checked']}")
        print(f"{Fore.GREEN}✓ Bookings in window: {self.stats['bookings_selected']}")
        print(f"{Fore.BLUE}✓ Reminders sent: {self.stats['reminders_sent']}")
        print(f"{Fore.RED}✗ Reminders failed: {self.stats['reminders_failed']}")
        print(f"{Fore.RED}✗ Errors: {self.stats['errors']}")
        print(f"{Fore.CYAN}{'='*50}\n")

    def reset_stats(self):
        self.stats = {
            'bookings_checked': 0,
            'bookings_selected': 0,
            'reminders_sent': 0,
            'reminders_failed': 0,
            'errors': 0,
        }
