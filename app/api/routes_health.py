# app/api/routes_health.py
from fastapi import APIRouter

router = APIRouter()


@router.get("")
async def health():
    return {"status": "ok"}
