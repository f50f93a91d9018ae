"""
Data Models Package

Contains all data models used throughout the application.
"""

from .game import GuessResult, LetterResult, PublicView, RevealedView, Session, Verdict

__all__ = ['GuessResult', 'LetterResult', 'PublicView', 'RevealedView', 'Session', 'Verdict']
