import logging
from fastapi import FastAPI
from app.core.config import settings
from app.api.router import api_router

# Configure logging once for the whole app
logging.basicConfig(level=settings.LOG_LEVEL.upper())

app = FastAPI(title=settings.APP_TITLE)

# Include the master router containing all our endpoints
app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Welcome to the Orca Security Chatbot API"}
