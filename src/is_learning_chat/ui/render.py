"""HTML rendering for the chat widget.

Every function here is pure: the output depends only on the transcript and
the pending flag passed in. ``static/chat.js`` builds the same markup in the
browser, so class names must stay in sync with it.
"""

from html import escape
from typing import Iterable

from ..config import (
    APOLOGY_TEXT,
    APP_SUBTITLE,
    APP_TITLE,
    CHAT_ENDPOINT_PATH,
    FALLBACK_REPLY_TEXT,
    FOOTER_TEXT,
    INPUT_PLACEHOLDER,
)
from ..domain.models import Message

STYLES = """
body { margin: 0; font-family: system-ui, sans-serif; background: #f5f7fb; }
.chat { display: flex; flex-direction: column; height: 100vh; }
.chat-header { background: #fff; border-bottom: 1px solid #e2e8f0; padding: 1.5rem; }
.chat-header h1 { margin: 0; font-size: 1.75rem; color: #1d4ed8; }
.chat-header p { margin: 0; font-size: .875rem; color: #64748b; }
.transcript { flex: 1; overflow-y: auto; padding: 1.5rem; }
.row { display: flex; margin-bottom: 1rem; }
.row.user { justify-content: flex-end; }
.row.bot { justify-content: flex-start; }
.bubble { max-width: 32rem; padding: .75rem 1rem; border-radius: .5rem; }
.row.user .bubble { background: #1d4ed8; color: #fff; border-bottom-right-radius: 0; }
.row.bot .bubble { background: #fff; border: 1px solid #e2e8f0; border-bottom-left-radius: 0; }
.bubble .text { margin: 0; line-height: 1.5; white-space: pre-wrap; }
.bubble .time { margin: .25rem 0 0; font-size: .75rem; opacity: .7; }
.typing { display: flex; gap: .5rem; }
.typing span { width: .5rem; height: .5rem; border-radius: 50%; background: #1d4ed8;
  animation: bounce 1s infinite; }
.typing span:nth-child(2) { animation-delay: .1s; }
.typing span:nth-child(3) { animation-delay: .2s; }
@keyframes bounce { 0%, 100% { transform: translateY(0); } 50% { transform: translateY(-.4rem); } }
.composer { display: flex; gap: .5rem; padding: 1rem 1.5rem; background: #fff;
  border-top: 1px solid #e2e8f0; }
.composer input { flex: 1; padding: .5rem; }
.chat-footer { text-align: center; font-size: .75rem; color: #64748b; padding: .75rem; }
"""


def format_time(message: Message) -> str:
    """Hour and minute of the message in the host's local time zone."""
    return message.timestamp.astimezone().strftime("%H:%M")


def render_message(message: Message) -> str:
    """One bubble; user messages align right, bot messages left."""
    return (
        f'<div class="row {message.sender}" data-id="{escape(message.id)}">'
        f'<div class="bubble">'
        f'<p class="text">{escape(message.text)}</p>'
        f'<p class="time">{format_time(message)}</p>'
        f"</div></div>"
    )


def render_typing_indicator() -> str:
    return (
        '<div class="row bot typing-row"><div class="bubble">'
        '<div class="typing"><span></span><span></span><span></span></div>'
        "</div></div>"
    )


def render_transcript(messages: Iterable[Message], pending: bool) -> str:
    """Bubbles in transcript order, the typing indicator, then the scroll anchor."""
    parts = [render_message(message) for message in messages]
    if pending:
        parts.append(render_typing_indicator())
    parts.append('<div id="scroll-anchor"></div>')
    return "".join(parts)


def render_page(messages: Iterable[Message], pending: bool = False) -> str:
    """Full single-page document for the chat widget."""
    disabled = " disabled" if pending else ""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{escape(APP_TITLE)}</title>
<style>{STYLES}</style>
</head>
<body>
<div class="chat">
<header class="chat-header">
<h1>{escape(APP_TITLE)}</h1>
<p>{escape(APP_SUBTITLE)}</p>
</header>
<main id="transcript" class="transcript">{render_transcript(messages, pending)}</main>
<form id="composer" class="composer" data-endpoint="{escape(CHAT_ENDPOINT_PATH)}"
 data-fallback="{escape(FALLBACK_REPLY_TEXT)}" data-apology="{escape(APOLOGY_TEXT)}">
<input id="draft" type="text" autocomplete="off" placeholder="{escape(INPUT_PLACEHOLDER)}"{disabled}>
<button id="send" type="submit" disabled>Send</button>
</form>
<footer class="chat-footer"><p>{escape(FOOTER_TEXT)}</p></footer>
</div>
<script src="/static/chat.js"></script>
</body>
</html>
"""
