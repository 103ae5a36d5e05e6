# app/api/routes_summary.py
import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from app.schemas.request_schema import SummaryIn
from app.schemas.response_schema import SummaryOut
from app.services.llm_client import LLMError
from app.services.summary_service import failure_summary, summarize

log = logging.getLogger(__name__)
router = APIRouter()


# 의료진 전달 요약: 식사량/음수량/운동량/배변/특이사항/AI코멘트
@router.post("/medical-summary", response_model=SummaryOut)
async def medical_summary(req: SummaryIn):
    try:
        return await summarize(req)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except LLMError as e:
        log.error(f"Medical summary LLM call failed: {e}")
        # 실패해도 6개 필드를 모두 채워서 돌려준다
        return JSONResponse(status_code=502, content=failure_summary(e).model_dump())
