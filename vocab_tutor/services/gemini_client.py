from typing import Any, Dict, List
import logging
import google.generativeai as genai
from time import perf_counter
from ..config import settings
from ..errors import CollaboratorError
from .prompt_builder import PERSONA_PROMPT, PromptBuilder

logger = logging.getLogger("vocab_tutor")

class GeminiChatClient:
    """Completion and speech-to-text collaborator backed by Gemini."""

    def __init__(self) -> None:
        if settings.gemini_api_key:
            genai.configure(api_key=settings.gemini_api_key)
        self.model_name = settings.gemini_model
        self.generation_config = {
            "temperature": settings.chat_temperature,
            "max_output_tokens": settings.chat_max_output_tokens,
        }
        self.prompt_builder = PromptBuilder()

    def _require_key(self) -> None:
        if not settings.gemini_api_key:
            logger.warning({"event": "gemini_no_api_key"})
            raise CollaboratorError("completion_service_not_configured", status_code=503)

    def _extract_text(self, response: Any) -> str:
        try:
            raw_text = response.text or ""
        except ValueError:
            # .text raises when the candidate was blocked or has no parts
            raw_text = ""
        if not raw_text and getattr(response, "candidates", None):
            try:
                parts = response.candidates[0].content.parts
                raw_text = "".join(getattr(p, "text", "") for p in parts)
            except (AttributeError, IndexError):
                raw_text = ""
        return raw_text.strip()

    def complete(self, history: List[Dict[str, str]]) -> str:
        self._require_key()
        contents = self.prompt_builder.build_contents(history)
        try:
            logger.debug({"event": "gemini_request", "model": self.model_name, "turns": len(contents)})
            model = genai.GenerativeModel(
                self.model_name,
                system_instruction=PERSONA_PROMPT,
                generation_config=self.generation_config,
            )
            t0 = perf_counter()
            response = model.generate_content(
                contents,
                request_options={"timeout": settings.collaborator_timeout_seconds},
            )
            latency_ms = int((perf_counter() - t0) * 1000)
        except Exception as e:
            logger.exception("gemini_call_failed")
            raise CollaboratorError(f"completion_service_error: {e}") from e
        reply = self._extract_text(response)
        logger.debug({"event": "gemini_response", "preview": reply[:200], "latency_ms": latency_ms})
        if not reply:
            raise CollaboratorError("completion_service_empty_reply")
        return reply

    def transcribe(self, audio: bytes, mime_type: str) -> str:
        self._require_key()
        prompt = self.prompt_builder.build_transcription_prompt(settings.stt_language)
        try:
            logger.debug({"event": "stt_request", "model": self.model_name, "bytes": len(audio), "mime_type": mime_type})
            model = genai.GenerativeModel(self.model_name, generation_config={"temperature": 0.0})
            t0 = perf_counter()
            response = model.generate_content(
                [prompt, {"mime_type": mime_type, "data": audio}],
                request_options={"timeout": settings.collaborator_timeout_seconds},
            )
            latency_ms = int((perf_counter() - t0) * 1000)
        except Exception as e:
            logger.exception("stt_call_failed")
            raise CollaboratorError(f"transcription_service_error: {e}") from e
        text = self._extract_text(response)
        logger.debug({"event": "stt_response", "text": text, "latency_ms": latency_ms})
        return text
