"""
Services Package

Contains the game engine services and the use cases built on them.
"""

from .guess_evaluator import GuessEvaluator
from .word_selector import WordSelector, select_word, fnv1a_32, mulberry32, seeded_index
from .hint_provider import HintProvider, HintResult
from .results import (
    StartGameOutcome, StartGameResult,
    SubmitGuessError, SubmitGuessResult,
    UseHintError, UseHintResult,
    AbandonedGameInfo, AbandonGameResult
)
from .start_game import StartGameUseCase
from .submit_guess import SubmitGuessUseCase
from .use_hint import UseHintUseCase
from .abandon_game import AbandonGameUseCase

__all__ = [
    'GuessEvaluator',
    'WordSelector', 'select_word', 'fnv1a_32', 'mulberry32', 'seeded_index',
    'HintProvider', 'HintResult',
    'StartGameOutcome', 'StartGameResult',
    'SubmitGuessError', 'SubmitGuessResult',
    'UseHintError', 'UseHintResult',
    'AbandonedGameInfo', 'AbandonGameResult',
    'StartGameUseCase', 'SubmitGuessUseCase', 'UseHintUseCase', 'AbandonGameUseCase'
]
