from .client import WordPressClient, WordPressError, BookingNotFoundError

__all__ = ['WordPressClient', 'WordPressError', 'BookingNotFoundError']
