from pydantic import AliasChoices, BaseModel, Field, field_validator


class ChatRequest(BaseModel):
    message: str

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message must not be blank")
        return value


class ChatReply(BaseModel):
    reply: str


class ChatError(BaseModel):
    error: str


class CompletionOptions(BaseModel):
    model: str = Field(min_length=1)
    temperature: float = Field(ge=0, le=2)
    max_tokens: int = Field(gt=0)


class DocumentAnalysis(BaseModel):
    analysis: str
    pages: int
    word_count: int


class ComparedDocument(BaseModel):
    id: str = ""
    text: str = Field(default="", validation_alias=AliasChoices("text", "fullText"))


class CompareRequest(BaseModel):
    documents: list[ComparedDocument] = []


class DocumentComparison(BaseModel):
    comparison: str
    documents_compared: int


class HealthStatus(BaseModel):
    status: str
    provider_configured: bool
