from dataclasses import dataclass, field
from typing import Any, Dict, List

MAX_HISTORY = 20
HISTORY_ROLES = ("user", "assistant")

def _coerce_history(raw: Any) -> List[Dict[str, str]]:
	if not isinstance(raw, list):
		return []
	history: List[Dict[str, str]] = []
	for entry in raw:
		if not isinstance(entry, dict):
			continue
		role = entry.get("role")
		content = entry.get("content")
		if role not in HISTORY_ROLES or not isinstance(content, str):
			continue
		history.append({"role": role, "content": content})
	return history[-MAX_HISTORY:]

def _coerce_vocabulary(raw: Any) -> List[str]:
	if not isinstance(raw, list):
		return []
	return [word for word in raw if isinstance(word, str)]

def _coerce_index(raw: Any, upper: int) -> int:
	# bool is an int subclass but never a valid cursor
	if isinstance(raw, bool) or not isinstance(raw, int):
		return 0
	return min(max(raw, 0), upper)

def _coerce_flag(raw: Any) -> bool:
	return raw if isinstance(raw, bool) else False

@dataclass
class SessionState:
	"""Progress through one review session, round-tripped through the client on every request."""
	conversation_history: List[Dict[str, str]] = field(default_factory=list)
	today_vocabulary: List[str] = field(default_factory=list)
	current_quiz_index: int = 0
	quiz_mode: bool = False
	waiting_for_pronunciation: bool = False

	@classmethod
	def from_snapshot(cls, snapshot: Any) -> "SessionState":
		"""Rebuild a session from an untrusted client snapshot.

		Each known field is coerced on its own; anything malformed falls back to
		its default and unknown keys are ignored. Never raises.
		"""
		if not isinstance(snapshot, dict):
			return cls()
		vocabulary = _coerce_vocabulary(snapshot.get("todayVocabulary"))
		index = _coerce_index(snapshot.get("currentQuizIndex"), len(vocabulary))
		quiz_mode = _coerce_flag(snapshot.get("quizMode"))
		waiting = _coerce_flag(snapshot.get("waitingForPronunciation"))
		if waiting and (not quiz_mode or index >= len(vocabulary)):
			waiting = False
		return cls(
			conversation_history=_coerce_history(snapshot.get("conversationHistory")),
			today_vocabulary=vocabulary,
			current_quiz_index=index,
			quiz_mode=quiz_mode,
			waiting_for_pronunciation=waiting,
		)

	def to_snapshot(self) -> Dict[str, Any]:
		return {
			"conversationHistory": [dict(entry) for entry in self.conversation_history],
			"todayVocabulary": list(self.today_vocabulary),
			"currentQuizIndex": self.current_quiz_index,
			"quizMode": self.quiz_mode,
			"waitingForPronunciation": self.waiting_for_pronunciation,
		}

	def append_turn(self, role: str, content: str) -> None:
		self.conversation_history.append({"role": role, "content": content})
		if len(self.conversation_history) > MAX_HISTORY:
			self.conversation_history = self.conversation_history[-MAX_HISTORY:]

	def current_word(self) -> str | None:
		if self.current_quiz_index < len(self.today_vocabulary):
			return self.today_vocabulary[self.current_quiz_index]
		return None

	def review_complete(self) -> bool:
		return self.current_quiz_index >= len(self.today_vocabulary)
