# -*- coding: utf-8 -*-
from __future__ import annotations


class SoundSpellError(ValueError):
    """Base class for every failure raised by the conversion pipeline."""


class EmptyInput(SoundSpellError):
    def __init__(self, what: str = "arpabet phoneme string"):
        super().__init__(f"{what} cannot be empty")


class UnknownPhoneme(SoundSpellError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f'phoneme "{token}" was not found')


class InvalidTable(SoundSpellError):
    def __init__(self, reason: str = "invalid conversion table"):
        super().__init__(reason)
