# app/main.py
from dotenv import load_dotenv

load_dotenv()

import logging.config
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.appconfig import settings

# Apply logging configuration
logging.config.dictConfig(settings.LOGGING_CONFIG)

# Import routers
from app.chat_proxy.routes import router as chat_router
from app.clinic_services.clinic_routes import router as clinic_router
from app.record_store.file_store import RecordStore

# Import configurations
from config.chatconfig import chat_settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    store = RecordStore()
    print("\n===============================================================================")
    print(f" 🚀 Server is running on port {settings.PORT}")
    print(f" ✅ Data directory: {store.data_dir}")
    for collection, filename in store.filenames.items():
        print(f" ✅ {collection.capitalize()} file: {filename}")
    print(f" ✅ Chat model: groq - {chat_settings.GROQ_CHAT_MODEL}")
    print("===============================================================================\n")
    yield
    # Shutdown
    print("👋 Shutting down")


app = FastAPI(
    title="Clinic Queue Backend",
    description="JSON-file appointment queue, reports and Groq chat proxy",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes are served at the root, without prefixes
app.include_router(clinic_router, tags=["Clinic Queue"])
app.include_router(chat_router, tags=["Chat"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
