import logging
from ..state import SessionState
from .gemini_client import GeminiChatClient
from .quiz_engine import QuizEngine

logger = logging.getLogger("vocab_tutor")

class DialogueRouter:
    """Sends a learner message to the quiz engine or to free conversation."""

    def __init__(self, engine: QuizEngine, chat_client: GeminiChatClient) -> None:
        self.engine = engine
        self.chat_client = chat_client

    def handle_message(self, message: str, state: SessionState) -> str:
        if state.quiz_mode and state.waiting_for_pronunciation:
            feedback = self.engine.evaluate_answer(message, state)
            return feedback.message
        state.append_turn("user", message)
        logger.debug({"event": "free_chat", "history_len": len(state.conversation_history)})
        reply = self.chat_client.complete(state.conversation_history)
        state.append_turn("assistant", reply)
        return reply
