"""
Models Package

Exports all models for easy importing.
"""

from signup.models.registrant import Registrant
from signup.models.admin import AdminCredential

__all__ = ['Registrant', 'AdminCredential']
