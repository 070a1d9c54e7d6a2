"""
OAuth2 pieces: credential manager and redirect listener.
"""

from __future__ import annotations

from .callback import CallbackReceiver
from .credentials import CredentialManager, ManagedCredentials

__all__ = ["CallbackReceiver", "CredentialManager", "ManagedCredentials"]
