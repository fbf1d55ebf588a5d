"""Pydantic models for API response bodies."""

from pydantic import BaseModel, Field


class Post(BaseModel):
    """A single post."""

    id: str = Field(examples=["1"])
    title: str = Field(examples=["Hello World"])


class PostResponse(BaseModel):
    """Body of a successful post lookup."""

    post: Post


class ValidateResponse(BaseModel):
    """Echo of an accepted age/email pair."""

    age: int = Field(examples=[25])
    email: str = Field(examples=["foo@example.com"])


class ErrorResponse(BaseModel):
    """Uniform error body."""

    error: str = Field(examples=["not found"])
