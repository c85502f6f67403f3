"""
Villa Claudia Document Portal.

Guests upload passport and ID scans for a booking through an emailed link; the
files are forwarded to the administrator by email and never stored.
"""

__version__ = "1.0.0"
__description__ = "Guest travel document uploads for Villa Claudia"
