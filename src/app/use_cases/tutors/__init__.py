"""
Tutor Management Use Cases

Administrator-facing tutor registration.
"""

from .create_tutor_use_case import CreateTutorUseCase
from .delete_tutor_use_case import DeleteTutorUseCase
from .dtos import DeleteTutorResponse, TutorResponse

__all__ = [
    "CreateTutorUseCase",
    "DeleteTutorUseCase",
    "TutorResponse",
    "DeleteTutorResponse",
]
