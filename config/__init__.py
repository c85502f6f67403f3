"""
Configuration module for the Villa Claudia document portal.
"""

from .settings import email_config, wordpress_config, app_config

__all__ = ['email_config', 'wordpress_config', 'app_config']
