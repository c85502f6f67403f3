"""
API route modules.
"""
from . import admin, auth, booking, diagnostics, health, scheduler, upload, uploads

__all__ = ['admin', 'auth', 'booking', 'diagnostics', 'health', 'scheduler', 'upload', 'uploads']
