# config/chatconfig.py
"""
Chat Proxy Configuration
Controls the Groq completion model used by /chat
"""
from pydantic import Field
from pydantic_settings import BaseSettings


class ChatSettings(BaseSettings):
    """Configuration for the chat completion proxy"""

    # ── Groq Settings (Cloud, Ultra-fast, Free tier) ──
    # Missing key is not validated here; requests fail at call time instead
    GROQ_API_KEY: str = Field(default="", env="GROQ_API_KEY")
    GROQ_CHAT_MODEL: str = "llama3-8b-8192"
    # Alternatives: "llama-3.1-8b-instant", "llama-3.3-70b-versatile"

    class Config:
        env_file = ".env"
        extra = "ignore"


chat_settings = ChatSettings()
