from fastapi import APIRouter

from app.schemas.ride import ride_options

router = APIRouter(prefix="/rides", tags=["rides"])


@router.get("/options")
async def get_ride_options():
    return ride_options()
