class NewsError(Exception):
    """Base class for failures while fetching the news feed."""


class ConfigError(NewsError):
    """Raised when the Gemini API key is not configured."""


class ParseError(NewsError):
    """Raised when the model output is not a valid JSON list of news items."""


class UpstreamError(NewsError):
    """Raised when the Gemini API call fails."""


class UnknownError(NewsError):
    """Raised for failures that carry no description."""
