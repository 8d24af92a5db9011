"""
Modelos do core.

Localização: core/models/
"""
from .user_model import UserModel

__all__ = ['UserModel']
