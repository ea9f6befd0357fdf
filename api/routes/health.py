from fastapi import APIRouter

from api.schemas import HealthResponse
from config.settings import get_settings

router = APIRouter(tags=['health'])


@router.get('/health', response_model=HealthResponse)
def health() -> HealthResponse:
	return HealthResponse(status='ok', app=get_settings().APP_NAME)
