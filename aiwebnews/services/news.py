"""Gemini news service: asks Gemini, grounded with Google Search, for the week's AI-in-web-engineering news."""

import asyncio
import json
import logging
import re
from typing import Any, Iterable

from google import genai
from google.genai import types
from pydantic import TypeAdapter, ValidationError

from aiwebnews.config import get_settings
from aiwebnews.exceptions import ConfigError, ParseError, UnknownError, UpstreamError
from aiwebnews.models.news import GroundingChunk, NewsData, NewsItem, WebSource

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"

NEWS_PROMPT = """
Generate a list of the latest news items and trends regarding the use of Artificial Intelligence in web engineering from the last 7 days.
Focus on recent developments, new tools, and notable projects.
For each item, provide a clear title and a concise summary.
IMPORTANT: Your response MUST be a valid JSON array of objects, where each object has a "title" and "summary" key.
Do not include any other text, markdown, or formatting outside of the JSON array itself.
Example: [{"title": "Example Title", "summary": "Example summary."}]
"""

PARSE_ERROR_MESSAGE = "Failed to parse the news data. The format received was invalid."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred while fetching news."

_JSON_FENCE = re.compile(r"```json\n([\s\S]*?)\n```")
_FENCE = "```"

_news_items_adapter = TypeAdapter(list[NewsItem])


def _get_client() -> genai.Client:
    api_key = get_settings().api_key
    if not api_key:
        raise ConfigError("API_KEY environment variable not set")
    return genai.Client(api_key=api_key)


def extract_json_payload(text: str) -> str:
    """Strip markdown fencing the model sometimes wraps around its JSON.

    A ```json block anywhere in the text wins over a plain ``` fence around the
    whole text; otherwise the text is used as-is.
    """
    match = _JSON_FENCE.search(text)
    if match and match.group(1):
        text = match.group(1)
    elif text.startswith(_FENCE) and text.endswith(_FENCE):
        text = text[len(_FENCE):-len(_FENCE)]
    return text.strip()


def parse_news_items(payload: str) -> list[NewsItem]:
    """Parse a JSON array of {title, summary} objects. Raises ParseError on anything else."""
    try:
        return _news_items_adapter.validate_python(json.loads(payload))
    except (json.JSONDecodeError, ValidationError) as e:
        raise ParseError(PARSE_ERROR_MESSAGE) from e


def _field(obj: Any, name: str) -> Any:
    # SDK responses are objects, canned/test data is often plain dicts
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def filter_sources(chunks: Iterable[Any] | None) -> list[GroundingChunk]:
    """Keep only citations with a web source that has both a uri and a title.

    Order is preserved and duplicates are kept.
    """
    sources = []
    for chunk in chunks or []:
        if chunk is None:
            continue
        web = _field(chunk, "web")
        if web is None:
            continue
        uri = _field(web, "uri")
        title = _field(web, "title")
        if not (_is_filled(uri) and _is_filled(title)):
            continue
        sources.append(GroundingChunk(web=WebSource(uri=uri, title=title)))
    return sources


def _grounding_chunks(response: Any) -> list[Any]:
    candidates = _field(response, "candidates") or []
    if not candidates:
        return []
    metadata = _field(candidates[0], "grounding_metadata")
    if metadata is None:
        return []
    return _field(metadata, "grounding_chunks") or []


async def fetch_news(model: str = DEFAULT_MODEL) -> NewsData:
    """Fetch and normalize this week's AI-in-web-engineering news.

    Makes exactly one Gemini call. Every failure surfaces as a NewsError subclass.
    """
    client = _get_client()
    try:
        response = await client.aio.models.generate_content(
            model=model,
            contents=NEWS_PROMPT,
            config=types.GenerateContentConfig(
                tools=[types.Tool(google_search=types.GoogleSearch())],
            ),
        )
        news_items = parse_news_items(extract_json_payload(response.text or ""))
        sources = filter_sources(_grounding_chunks(response))
    except ParseError:
        logger.exception("Error parsing news from Gemini API")
        raise
    except Exception as e:
        logger.exception("Error fetching news from Gemini API")
        raise UpstreamError(f"Failed to fetch news: {str(e) or type(e).__name__}") from e
    except (KeyboardInterrupt, SystemExit, GeneratorExit, asyncio.CancelledError):
        raise
    except BaseException as e:
        # Raised objects outside the Exception hierarchy
        logger.exception("Unknown failure fetching news from Gemini API")
        raise UnknownError(UNKNOWN_ERROR_MESSAGE) from e

    logger.info("Fetched %d news items with %d sources", len(news_items), len(sources))
    return NewsData(news_items=news_items, sources=sources)
