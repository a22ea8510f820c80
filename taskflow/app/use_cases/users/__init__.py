"""
User Use Cases

Profile and credential management for the authenticated user.
"""

from .get_profile_use_case import GetProfileUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .change_password_use_case import ChangePasswordUseCase
from .dtos import UserProfileResponse, ChangePasswordResponse

__all__ = [
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "ChangePasswordUseCase",
    "UserProfileResponse",
    "ChangePasswordResponse",
]
