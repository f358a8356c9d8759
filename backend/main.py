import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import get_settings
from routers import health
from routers.resume import router as resume_router
from routers.templates import router as templates_router
from routers.export import router as export_router

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Resume Builder Server",
    description="Resume parsing, template filling and export",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/health")
app.include_router(resume_router)
app.include_router(templates_router)
app.include_router(export_router)

@app.get("/")
def root():
    return {"message": "Resume builder backend is running...."}
