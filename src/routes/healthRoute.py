from fastapi import APIRouter

from src.schemas.contactSchema import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse()
