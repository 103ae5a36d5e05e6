# app/api/routes_trend.py
import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from app.schemas.request_schema import TrendIn
from app.schemas.response_schema import TrendOut
from app.services.llm_client import LLMError
from app.services.summary_service import analyze_trend

log = logging.getLogger(__name__)
router = APIRouter()


# 일별 기록 추이 분석: 식사량/음수량/운동량/부작용
@router.post("/trend-analysis", response_model=TrendOut)
async def trend_analysis(req: TrendIn):
    try:
        return await analyze_trend(req)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except LLMError as e:
        log.error(f"Trend analysis LLM call failed: {e}")
        return JSONResponse(
            status_code=502,
            content={"error": "추이 분석 생성 중 오류가 발생했습니다.", "details": str(e)},
        )
