from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional

class QuestionPrompt(BaseModel):
    prompt: str
    target_word: Optional[str] = None
    celebration: bool = False

class AnswerFeedback(BaseModel):
    message: str
    correct: bool

class ChatRequest(BaseModel):
    message: Optional[str] = None
    session_state: Any = Field(default=None, alias="sessionState")

    model_config = ConfigDict(populate_by_name=True)

class ChatResponse(BaseModel):
    response: str
    session_state: Dict[str, Any] = Field(alias="sessionState")

    model_config = ConfigDict(populate_by_name=True)

class StartReviewRequest(BaseModel):
    words: List[str] | str | None = None
    session_state: Any = Field(default=None, alias="sessionState")

    model_config = ConfigDict(populate_by_name=True)

class NextQuestionRequest(BaseModel):
    session_state: Any = Field(default=None, alias="sessionState")

    model_config = ConfigDict(populate_by_name=True)

class NextQuestionResponse(BaseModel):
    question: str
    target_word: Optional[str] = Field(default=None, alias="targetWord")
    celebration: bool = False
    session_state: Dict[str, Any] = Field(alias="sessionState")

    model_config = ConfigDict(populate_by_name=True)

class SpeakRequest(BaseModel):
    text: Optional[str] = None

class SttResponse(BaseModel):
    text: str

class HealthResponse(BaseModel):
    status: str
    timestamp: str
