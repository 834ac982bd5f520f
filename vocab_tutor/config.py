import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseModel):
    gemini_api_key: str | None = os.getenv("GEMINI_API_KEY")
    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    chat_temperature: float = float(os.getenv("CHAT_TEMPERATURE", "0.7"))
    chat_max_output_tokens: int = int(os.getenv("CHAT_MAX_OUTPUT_TOKENS", "300"))
    stt_language: str = os.getenv("STT_LANGUAGE", "en")
    openai_api_key: str | None = os.getenv("OPENAI_API_KEY")
    tts_model: str = os.getenv("TTS_MODEL", "tts-1")
    tts_voice: str = os.getenv("TTS_VOICE", "nova")
    collaborator_timeout_seconds: float = float(os.getenv("COLLABORATOR_TIMEOUT_SECONDS", "30"))
    log_level: str = os.getenv("LOG_LEVEL", "DEBUG")

settings = Settings()
