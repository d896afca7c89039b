# app/chat_proxy/groq_chat_client.py
"""
Groq Chat Client - single-turn text completion
One blocking round trip per prompt: no retries, no streaming
"""
import logging
import os
import threading

from app.shared.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class GroqChatClient:
    """Groq chat-completion client, created lazily on first use"""

    def __init__(self, api_key: str = None, model: str = None):
        self._api_key = api_key
        self._model = model
        self._client = None
        self._load_attempted = False
        self._load_lock = threading.Lock()

    @property
    def model(self) -> str:
        from config.chatconfig import chat_settings

        return self._model or chat_settings.GROQ_CHAT_MODEL

    def _lazy_load_client(self):
        """Initialize Groq client on first use"""
        if self._load_attempted:
            return
        # Threadpool requests share this instance; the first one builds the client
        with self._load_lock:
            if self._load_attempted:
                return

            from config.chatconfig import chat_settings

            api_key = self._api_key or chat_settings.GROQ_API_KEY or os.getenv("GROQ_API_KEY")
            if not api_key:
                logger.warning("⚠️  GROQ_API_KEY not set - /chat requests will fail")
            else:
                from groq import Groq

                self._client = Groq(api_key=api_key)
                logger.info(f"✅ Groq client initialized with model: {self.model}")
            self._load_attempted = True

    def complete(self, prompt: str) -> str:
        """
        Send one user message and return the first choice's text.

        Returns an empty string when the API answers without content.
        """
        self._lazy_load_client()

        if not self._client:
            raise UpstreamError("Groq client not initialized. Check API key.")

        logger.info(f"🚀 Querying Groq {self.model} ({len(prompt)} chars)...")

        try:
            response = self._client.chat.completions.create(
                messages=[{"role": "user", "content": prompt}],
                model=self.model,
            )
        except Exception as e:
            logger.error(f"❌ Groq completion failed: {e}")
            raise UpstreamError(f"Groq completion error: {e}") from e

        if not response.choices:
            return ""
        content = response.choices[0].message.content or ""
        logger.info(f"✅ Groq reply: {len(content)} chars")
        return content


# Global instance
groq_chat_client = GroqChatClient()
