# /student_records/services/confirmation.py

from typing import Protocol


class ConfirmationPrompt(Protocol):
    async def confirm(self, title: str, text: str) -> bool: ...


class PresetConfirmation:
    """
    A prompt whose answer is already known, e.g. from a `confirm` flag the
    client sent after showing its own dialog.
    """

    def __init__(self, answer: bool):
        self.answer = answer

    async def confirm(self, title: str, text: str) -> bool:
        return self.answer
