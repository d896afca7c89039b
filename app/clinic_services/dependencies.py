# app/clinic_services/dependencies.py
from app.chat_proxy.groq_chat_client import GroqChatClient, groq_chat_client
from app.record_store.file_store import RecordStore


# ===========================================
# ✅ Record Store (paths resolved per request)
# ===========================================
def get_record_store() -> RecordStore:
    return RecordStore()


# ===========================================
# ✅ Shared Groq Chat Client
# ===========================================
def get_chat_client() -> GroqChatClient:
    return groq_chat_client
