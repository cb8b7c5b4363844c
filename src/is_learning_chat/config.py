"""Application settings and fixed texts."""

import os
from typing import List, Optional

APP_TITLE = "IS Learning Chatbot"
APP_SUBTITLE = "Learn Information Systems with AI"
FOOTER_TEXT = "BY_#D1 | Educational AI Chatbot"

CHAT_ENDPOINT_PATH = "/api/chat"

DEFAULT_MODEL = "gemini-1.5-flash"

SYSTEM_INSTRUCTION = """You are an expert educational chatbot specializing in Information Systems (IS).
Your role is to help students learn about:
- Information Technology fundamentals
- Database management systems
- Networks and cybersecurity
- Software development concepts
- Enterprise systems
- Data analysis and business intelligence
- IT management and governance

Keep your responses:
- Clear and educational
- Concise but comprehensive
- Beginner-friendly when needed
- Focused on practical understanding
- Include examples when helpful"""

WELCOME_TEXT = (
    "Hello! 👋 I'm your IS Learning Chatbot. I'm here to help you learn about "
    "Information Systems, technology concepts, and best practices. "
    "What would you like to learn about today?"
)
INPUT_PLACEHOLDER = "Ask me anything about Information Systems..."

# Shown when a 2xx reply carries no usable "response" field
FALLBACK_REPLY_TEXT = "I apologize, I couldn't process your request. Please try again."
# Shown when the request itself fails
APOLOGY_TEXT = "Sorry, I encountered an error. Please try again later."

INVALID_MESSAGE_ERROR = "Invalid message"
GENERATION_FAILED_ERROR = "Failed to process your message"


def get_model_name() -> str:
    """Model identifier passed to the provider."""
    return os.getenv("IS_CHAT_MODEL", DEFAULT_MODEL)


def get_api_key() -> Optional[str]:
    """Provider credential, if one is set in the environment."""
    return os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")


def get_cors_origins() -> List[str]:
    raw = os.getenv("IS_CHAT_CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
