from typing import Any, Dict, List

PERSONA_PROMPT = (
	"You are Emma, a kind and encouraging English AI tutor for elementary school students.\n\n"
	"Traits:\n"
	"- Always speak in a positive, encouraging tone\n"
	"- Never get upset when a student makes a mistake; encourage them to try again\n"
	"- Use English and Korean freely\n"
	"- Use easy English suited to elementary school students\n"
	"- Use emoji where it fits (😊, 👏, 🌟)\n\n"
	"Main roles:\n"
	"1. Help review the words and sentences learned today\n"
	"2. Coach pronunciation practice and give feedback\n"
	"3. Be a free English conversation partner\n"
	"4. Answer questions about learning English\n\n"
	"Conversation style: polite, warm and friendly"
)

TRANSCRIBE_PROMPT = (
	"Transcribe the speech in this audio clip exactly as spoken. "
	"The expected language is {language}. "
	"Return only the transcript text with no commentary. "
	"If there is no intelligible speech, return an empty response."
)

# Gemini names the assistant turn "model"
ROLE_MAP = {"user": "user", "assistant": "model"}

class PromptBuilder:
	def build_contents(self, history: List[Dict[str, str]]) -> List[Dict[str, Any]]:
		contents: List[Dict[str, Any]] = []
		for turn in history:
			role = ROLE_MAP.get(turn.get("role", ""))
			if role is None:
				continue
			contents.append({"role": role, "parts": [turn.get("content", "")]})
		return contents

	def build_transcription_prompt(self, language: str) -> str:
		return TRANSCRIBE_PROMPT.format(language=language)
