from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from aiwebnews.models.news import GroundingChunk, NewsItem


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"


class Failed(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["failed"] = "failed"
    message: str


class Ready(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["ready"] = "ready"
    news_items: list[NewsItem]
    sources: list[GroundingChunk] = []


# Exactly one of these is current at any time.
ViewState = Annotated[Union[Loading, Failed, Ready], Field(discriminator="status")]
