"""Generation run domain exports."""

from .generation_use_case import GenerationError, execute_generation
from .run_contracts import GenerationOutcome, GenerationRequest

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "GenerationError",
    "execute_generation",
]
