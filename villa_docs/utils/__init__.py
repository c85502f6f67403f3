"""
Utility modules for the Villa Claudia document portal.
"""

from .logger import setup_logger, get_logger, ReminderLogger
from .models import Booking, Traveler, UploadedFile, UploadSubmission, ReminderResult

__all__ = [
    'setup_logger', 'get_logger', 'ReminderLogger',
    'Booking', 'Traveler', 'UploadedFile', 'UploadSubmission', 'ReminderResult',
]
