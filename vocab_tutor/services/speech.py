import logging
from time import perf_counter
from openai import OpenAI, OpenAIError
from ..config import settings
from ..errors import CollaboratorError

logger = logging.getLogger("vocab_tutor")

class SpeechSynthesizer:
    """Text-to-speech collaborator; returns MP3 bytes."""

    def __init__(self) -> None:
        self.model_name = settings.tts_model
        self.voice = settings.tts_voice
        self.client: OpenAI | None = None
        if settings.openai_api_key:
            self.client = OpenAI(api_key=settings.openai_api_key, timeout=settings.collaborator_timeout_seconds, max_retries=0)

    def synthesize(self, text: str) -> bytes:
        if self.client is None:
            logger.warning({"event": "tts_no_api_key"})
            raise CollaboratorError("speech_service_not_configured", status_code=503)
        try:
            logger.debug({"event": "tts_request", "model": self.model_name, "voice": self.voice, "chars": len(text)})
            t0 = perf_counter()
            speech = self.client.audio.speech.create(
                model=self.model_name,
                voice=self.voice,
                input=text,
                response_format="mp3",
            )
            audio = speech.content
        except OpenAIError as e:
            logger.exception("tts_call_failed")
            raise CollaboratorError(f"speech_service_error: {e}") from e
        logger.debug({"event": "tts_response", "bytes": len(audio), "latency_ms": int((perf_counter() - t0) * 1000)})
        if not audio:
            raise CollaboratorError("speech_service_empty_audio")
        return audio
