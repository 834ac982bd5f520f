import logging
import random
from typing import List, Sequence
from ..models import AnswerFeedback, QuestionPrompt
from ..state import SessionState
from .similarity import similarity

logger = logging.getLogger("vocab_tutor")

MATCH_THRESHOLD = 0.7

NOT_PRACTICING_MESSAGE = "We're not currently in pronunciation-practice mode! 😊"

PRAISE_TEMPLATES = (
    "Great job! 👏 Your pronunciation of '{word}' is really good!",
    "Perfect! 🌟 You said '{word}' very well!",
    "Amazing! 💪 You pronounced '{word}' like a native speaker!",
)

ENCOURAGEMENT_TEMPLATES = (
    "So close! Shall we try saying '{word}' one more time? 😊",
    "Almost there! Try saying '{word}' again, nice and slowly! 💪",
    "That's okay! Let's say '{word}' once more! 🌟",
)


def normalize_words(words: Sequence[str]) -> List[str]:
    return [w.strip() for w in words if isinstance(w, str) and w.strip()]


def is_match(target: str, answer: str) -> bool:
    """Accept close pronunciations, or either string containing the other."""
    if not answer:
        return False
    return similarity(target, answer) >= MATCH_THRESHOLD or answer in target or target in answer


class QuizEngine:
    """Drives a vocabulary review: Idle -> AwaitingNext <-> AwaitingAnswer -> Complete."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def start_review(self, words: Sequence[str], state: SessionState) -> str:
        state.today_vocabulary = normalize_words(words)
        state.current_quiz_index = 0
        state.quiz_mode = True
        state.waiting_for_pronunciation = False
        logger.debug({"event": "review_started", "word_count": len(state.today_vocabulary)})
        vocab_list = ", ".join(state.today_vocabulary)
        return (
            "📚 Let's start our review!\n\n"
            f"Today's words: {vocab_list}\n\n"
            f"We'll review {len(state.today_vocabulary)} words in total! 🌟\n"
            "Here comes the first question! 💪"
        )

    def next_question(self, state: SessionState) -> QuestionPrompt:
        if state.review_complete():
            state.quiz_mode = False
            state.waiting_for_pronunciation = False
            logger.debug({"event": "review_complete", "word_count": len(state.today_vocabulary)})
            return QuestionPrompt(
                prompt=(
                    "🎉 Wow! You finished the whole review!\n\n"
                    f"You practiced all {len(state.today_vocabulary)} words!\n"
                    "You did an amazing job! 👏✨\n\n"
                    "If you review like this every day, your English will grow so fast! 💪\n\n"
                    "🌟 Now let's chat freely in English!\n"
                    "🌟 Ask me anything you're curious about!"
                ),
                target_word=None,
                celebration=True,
            )
        word = state.current_word()
        state.waiting_for_pronunciation = True
        logger.debug({"event": "question_served", "index": state.current_quiz_index, "word": word})
        return QuestionPrompt(
            prompt=(
                f"🎯 Question {state.current_quiz_index + 1}\n\n"
                f"Try pronouncing '{word}' in English!\n\n"
                "First, listen to how Emma says it 👂"
            ),
            target_word=word,
            celebration=False,
        )

    def evaluate_answer(self, spoken_text: str, state: SessionState) -> AnswerFeedback:
        if not state.waiting_for_pronunciation:
            return AnswerFeedback(message=NOT_PRACTICING_MESSAGE, correct=False)
        word = state.current_word()
        if word is None:
            # the snapshot invariant should make this unreachable
            state.waiting_for_pronunciation = False
            return AnswerFeedback(message=NOT_PRACTICING_MESSAGE, correct=False)
        target = word.lower()
        answer = (spoken_text or "").lower().strip()
        correct = is_match(target, answer)
        logger.debug({"event": "answer_evaluated", "index": state.current_quiz_index, "target": target, "answer": answer, "correct": correct})
        if correct:
            state.current_quiz_index += 1
            state.waiting_for_pronunciation = False
            return AnswerFeedback(message=self.rng.choice(PRAISE_TEMPLATES).format(word=word), correct=True)
        return AnswerFeedback(message=self.rng.choice(ENCOURAGEMENT_TEMPLATES).format(word=word), correct=False)
