"""
Shared fixtures: fake collaborators and a deterministic template picker.
"""

from typing import Dict, List

import pytest

from vocab_tutor.errors import CollaboratorError
from vocab_tutor.services.quiz_engine import QuizEngine
from vocab_tutor.state import SessionState


class FirstChoice:
    """Random stand-in that always picks the first template."""

    def choice(self, seq):
        return seq[0]


class FakeChatClient:
    """Records completion/transcription calls and returns canned output."""

    def __init__(self, reply: str = "Hello! 😊", transcript: str = "apple", error: CollaboratorError | None = None):
        self.reply = reply
        self.transcript = transcript
        self.error = error
        self.calls: List[List[Dict[str, str]]] = []
        self.audio_calls: List[tuple] = []

    def complete(self, history):
        self.calls.append([dict(turn) for turn in history])
        if self.error:
            raise self.error
        return self.reply

    def transcribe(self, audio, mime_type):
        self.audio_calls.append((audio, mime_type))
        if self.error:
            raise self.error
        return self.transcript


class FakeSynthesizer:
    def __init__(self, audio: bytes = b"ID3fake-mp3", error: CollaboratorError | None = None):
        self.audio = audio
        self.error = error
        self.texts: List[str] = []

    def synthesize(self, text):
        self.texts.append(text)
        if self.error:
            raise self.error
        return self.audio


@pytest.fixture
def engine():
    return QuizEngine(rng=FirstChoice())


@pytest.fixture
def chat_client():
    return FakeChatClient()


@pytest.fixture
def awaiting_state():
    """A session waiting for the learner to say 'apple'."""
    return SessionState(
        today_vocabulary=["apple", "happy"],
        current_quiz_index=0,
        quiz_mode=True,
        waiting_for_pronunciation=True,
    )
