from fastapi import APIRouter, Depends, FastAPI, File, HTTPException, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from time import perf_counter
from datetime import datetime, timezone
from typing import List
from .state import SessionState
from .models import (
	ChatRequest,
	ChatResponse,
	HealthResponse,
	NextQuestionRequest,
	NextQuestionResponse,
	SpeakRequest,
	StartReviewRequest,
	SttResponse,
)
from .errors import CollaboratorError
from .services.dialogue_router import DialogueRouter
from .services.gemini_client import GeminiChatClient
from .services.quiz_engine import QuizEngine
from .services.speech import SpeechSynthesizer
from .config import settings

logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s %(message)s")
logger = logging.getLogger("vocab_tutor")

CORS_HEADERS = {
	"Access-Control-Allow-Origin": "*",
	"Access-Control-Allow-Methods": "GET, POST, OPTIONS",
	"Access-Control-Allow-Headers": "Content-Type",
	"Access-Control-Max-Age": "86400",
}

app = FastAPI(default_response_class=ORJSONResponse)
router = APIRouter(prefix="/api")

quiz_engine = QuizEngine()
chat_client = GeminiChatClient()
synthesizer = SpeechSynthesizer()

def get_quiz_engine() -> QuizEngine:
	return quiz_engine

def get_chat_client() -> GeminiChatClient:
	return chat_client

def get_synthesizer() -> SpeechSynthesizer:
	return synthesizer

def get_dialogue_router(
	engine: QuizEngine = Depends(get_quiz_engine),
	client: GeminiChatClient = Depends(get_chat_client),
) -> DialogueRouter:
	return DialogueRouter(engine, client)

def split_words(raw: List[str] | str) -> List[str]:
	if isinstance(raw, str):
		raw = raw.split(",")
	return [w.strip() for w in raw if w.strip()]

@app.on_event("startup")
def on_startup() -> None:
	logger.info({
		"event": "api_startup",
		"utc_time": datetime.now(timezone.utc).isoformat(),
		"model": settings.gemini_model,
		"completion_configured": bool(settings.gemini_api_key),
		"tts_configured": bool(settings.openai_api_key),
	})

@app.middleware("http")
async def timing_middleware(request: Request, call_next):
	start = perf_counter()
	response = await call_next(request)
	duration_ms = int((perf_counter() - start) * 1000)
	logger.debug({
		"event": "request_timing",
		"method": request.method,
		"path": request.url.path,
		"status_code": response.status_code,
		"duration_ms": duration_ms,
	})
	return response

@app.middleware("http")
async def cors_middleware(request: Request, call_next):
	# preflight is answered for every path, routed or not
	if request.method == "OPTIONS":
		return Response(status_code=204, headers=CORS_HEADERS)
	response = await call_next(request)
	response.headers.update(CORS_HEADERS)
	return response

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
	detail = "endpoint_not_found" if exc.status_code == 404 else exc.detail
	return ORJSONResponse({"error": detail}, status_code=exc.status_code)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
	logger.debug({"event": "invalid_request_body", "path": request.url.path, "errors": len(exc.errors())})
	return ORJSONResponse({"error": "invalid_request_body"}, status_code=400)

@app.exception_handler(CollaboratorError)
async def collaborator_exception_handler(request: Request, exc: CollaboratorError):
	logger.warning({"event": "collaborator_failed", "path": request.url.path, "status_code": exc.status_code, "error": exc.message})
	return ORJSONResponse({"error": exc.message}, status_code=exc.status_code)

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
	logger.exception("unhandled_request_error")
	# runs outside the http middlewares, so CORS headers are set here
	return ORJSONResponse(
		{"error": "internal_server_error", "details": str(exc)},
		status_code=500,
		headers=CORS_HEADERS,
	)

@router.post("/chat", response_model=ChatResponse)
def chat(payload: ChatRequest, dialogue: DialogueRouter = Depends(get_dialogue_router)):
	if not payload.message or not payload.message.strip():
		raise HTTPException(status_code=400, detail="message_required")
	state = SessionState.from_snapshot(payload.session_state)
	reply = dialogue.handle_message(payload.message, state)
	return ChatResponse(response=reply, session_state=state.to_snapshot())

@router.post("/start_review", response_model=ChatResponse)
def start_review(payload: StartReviewRequest, engine: QuizEngine = Depends(get_quiz_engine)):
	if payload.words is None:
		raise HTTPException(status_code=400, detail="words_required")
	state = SessionState.from_snapshot(payload.session_state)
	reply = engine.start_review(split_words(payload.words), state)
	return ChatResponse(response=reply, session_state=state.to_snapshot())

@router.post("/next_question", response_model=NextQuestionResponse, response_model_exclude_none=True)
def next_question(payload: NextQuestionRequest, engine: QuizEngine = Depends(get_quiz_engine)):
	state = SessionState.from_snapshot(payload.session_state)
	question = engine.next_question(state)
	return NextQuestionResponse(
		question=question.prompt,
		target_word=question.target_word,
		celebration=question.celebration,
		session_state=state.to_snapshot(),
	)

@router.post("/speak")
def speak(payload: SpeakRequest, tts: SpeechSynthesizer = Depends(get_synthesizer)):
	if not payload.text or not payload.text.strip():
		raise HTTPException(status_code=400, detail="text_required")
	audio = tts.synthesize(payload.text)
	return Response(content=audio, media_type="audio/mpeg", headers={"Cache-Control": "public, max-age=300"})

@router.post("/stt", response_model=SttResponse)
def speech_to_text(audio: UploadFile | None = File(None), client: GeminiChatClient = Depends(get_chat_client)):
	if audio is None:
		raise HTTPException(status_code=400, detail="audio_required")
	data = audio.file.read()
	if not data:
		raise HTTPException(status_code=400, detail="audio_required")
	text = client.transcribe(data, audio.content_type or "audio/webm")
	return SttResponse(text=text)

@router.get("/health", response_model=HealthResponse)
def health():
	return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc).isoformat())

app.include_router(router)
