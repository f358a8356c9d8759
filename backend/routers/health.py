from fastapi import APIRouter

from config import get_settings

router = APIRouter()
parent_route = "/health"

@router.get('')
def health():
    return {
        "route": parent_route,
        "data": {
            "health": "Server is healthy.",
            "extraction_mode": get_settings().extraction_mode,
        }
    }
