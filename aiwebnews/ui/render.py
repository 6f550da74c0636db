"""HTML rendering for the news page. Pure functions of the current view state."""

import html

from aiwebnews.models.news import GroundingChunk, NewsItem
from aiwebnews.models.view import Failed, Loading, Ready, ViewState

PAGE_TITLE = "AI in Web Engineering"
TAGLINE = "The Latest News & Trends from the Past Week, Grounded in Reality"
FOOTER = "Powered by Gemini and Google Search"

# Seconds between browser reloads while the fetch is still running.
LOADING_REFRESH_SECONDS = 3

_STYLES = """
body { margin: 0; background: #111827; color: #e5e7eb; font-family: system-ui, sans-serif; }
.container { max-width: 56rem; margin: 0 auto; padding: 2rem 1rem; }
header { text-align: center; margin-bottom: 2.5rem; }
header h1 { font-size: 2.5rem; color: #22d3ee; margin: 0 0 .5rem; }
.tagline { color: #9ca3af; font-size: 1.125rem; }
main { background: rgba(31, 41, 55, .5); border: 1px solid #374151; border-radius: 1rem; padding: 2rem; }
.spinner { margin: 6rem auto; width: 3rem; height: 3rem; border: 4px solid rgba(34, 211, 238, .25);
           border-top-color: #22d3ee; border-radius: 50%; animation: spin 1s linear infinite; }
@keyframes spin { to { transform: rotate(360deg); } }
.error { background: rgba(127, 29, 29, .5); border: 1px solid #dc2626; color: #fecaca;
         padding: .75rem 1rem; border-radius: .5rem; }
article { background: rgba(31, 41, 55, .7); border: 1px solid #374151; border-radius: .75rem;
          padding: 1.5rem; margin-bottom: 2rem; }
article h2, .sources h2 { color: #67e8f9; margin-top: 0; }
article p { color: #d1d5db; line-height: 1.6; }
.sources { margin-top: 2.5rem; padding-top: 1.5rem; border-top: 1px solid #374151; }
.sources a { color: #60a5fa; word-break: break-all; }
footer { text-align: center; margin-top: 2.5rem; color: #6b7280; font-size: .875rem; }
"""


def _esc(value: str) -> str:
    return html.escape(value, quote=True)


def render_loading() -> str:
    return '<div class="spinner" role="progressbar" aria-busy="true" aria-label="Loading news"></div>'


def render_error(message: str) -> str:
    return (
        '<div class="error" role="alert">'
        f"<strong>Error: </strong><span>{_esc(message)}</span>"
        "</div>"
    )


def render_item(item: NewsItem) -> str:
    return f"<article><h2>{_esc(item.title)}</h2><p>{_esc(item.summary)}</p></article>"


def render_sources(sources: list[GroundingChunk]) -> str:
    """Citation links, or an empty string when there are none."""
    if not sources:
        return ""
    links = []
    for source in sources:
        label = source.web.title or source.web.uri
        links.append(
            f'<li><a href="{_esc(source.web.uri)}" target="_blank" rel="noopener noreferrer">'
            f"{_esc(label)}</a></li>"
        )
    return f'<section class="sources"><h2>Sources</h2><ul>{"".join(links)}</ul></section>'


def render_body(state: ViewState) -> str:
    if isinstance(state, Loading):
        return render_loading()
    if isinstance(state, Failed):
        return render_error(state.message)
    if isinstance(state, Ready):
        items = "".join(render_item(item) for item in state.news_items)
        return f'<div class="news">{items}</div>{render_sources(state.sources)}'
    raise TypeError(f"Unknown view state: {state!r}")


def render_page(state: ViewState) -> str:
    """Full HTML document for the given state."""
    refresh = ""
    if isinstance(state, Loading):
        refresh = f'<meta http-equiv="refresh" content="{LOADING_REFRESH_SECONDS}">'
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
{refresh}
<title>{PAGE_TITLE}</title>
<style>{_STYLES}</style>
</head>
<body>
<div class="container">
<header>
<h1>{PAGE_TITLE}</h1>
<p class="tagline">{_esc(TAGLINE)}</p>
</header>
<main>{render_body(state)}</main>
<footer><p>{FOOTER}</p></footer>
</div>
</body>
</html>
"""
