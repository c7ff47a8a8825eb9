"""
Services Package

Exports all services for easy importing.
"""

from signup.services.registrants import RegistrantRepository
from signup.services.admins import AdminRepository
from signup.services.notifications import NotificationChannel, NEW_USER, UPDATE_USER, DELETE_USER
from signup.services.realtime import RealtimeBridge

__all__ = [
    'RegistrantRepository',
    'AdminRepository',
    'NotificationChannel',
    'RealtimeBridge',
    'NEW_USER',
    'UPDATE_USER',
    'DELETE_USER'
]
