from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.responses import MatchResult


class _CamelRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MatchTextRequest(_CamelRequest):
    resume_text: str = Field(..., description="Plain text resume content")
    job_description: str = Field(..., description="Job description text")


class ChatRequest(_CamelRequest):
    message: str = Field(..., min_length=1, max_length=2000, description="User question")
    match_result: MatchResult = Field(..., description="Result previously returned by /api/match")
