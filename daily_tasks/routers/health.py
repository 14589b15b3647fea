from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

@router.get("/", response_class=PlainTextResponse)
def root():
    return "Task App Backend is running!"

@router.get("/health/z")
def healthz():
    # Check si l'API est up
    return {"status": "ok"}
