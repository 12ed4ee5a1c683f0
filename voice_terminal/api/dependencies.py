"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from voice_terminal.container import container
from voice_terminal.use_cases.commands.handle_phrase import HandlePhraseUseCase


def get_handle_phrase_uc() -> HandlePhraseUseCase:
    """
    Get the handle phrase use case from the container.

    Returns:
        HandlePhraseUseCase: The handle phrase use case instance
    """
    return container.get_handle_phrase_use_case()
