from pydantic import BaseModel, ConfigDict


class NewsItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    summary: str


class WebSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    uri: str
    title: str


class GroundingChunk(BaseModel):
    model_config = ConfigDict(frozen=True)

    web: WebSource


class NewsData(BaseModel):
    model_config = ConfigDict(frozen=True)

    news_items: list[NewsItem]
    sources: list[GroundingChunk]
