"""
Configuration package for the hotel booking backend.

This package contains the environment settings used by the database,
security, storage, mail and logging layers.
"""

from hotel_booking.config.settings import Settings, get_settings, settings

__all__ = ['Settings', 'get_settings', 'settings']
