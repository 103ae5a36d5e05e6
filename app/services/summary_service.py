# app/services/summary_service.py
import logging
from typing import Optional, Tuple

from starlette.concurrency import run_in_threadpool

from app.core.config import settings
from app.prompts.summary_prompt import build_summary_prompt
from app.prompts.trend_prompt import build_trend_prompt
from app.schemas.request_schema import SessionInfo, SummaryIn, TrendIn
from app.schemas.response_schema import SummaryOut, TrendOut
from app.services.llm_client import generate_text
from app.services.record_formatter import format_records, has_user_input_text
from app.services.response_parser import parse_summary, parse_trend

log = logging.getLogger(__name__)

MISSING_INPUT = "필수 데이터가 누락되었습니다."
FAILURE_MESSAGE = "AI 분석 생성 중 오류가 발생했습니다."
NO_DATA_MESSAGE = "분석을 위해서는 기록이 더 쌓여야 합니다. 증상 기록을 계속 입력해주세요."
NO_DATA_COMMENT = (
    "상세한 AI 분석을 위해 식사 메뉴, 음수 내용, 운동 방식, 주요 증상 등을 텍스트로 입력해주세요. "
    "기록이 쌓일수록 더 정확한 분석이 가능합니다."
)


def failure_summary(err: Exception) -> SummaryOut:
    """외부 호출 실패 시에도 6개 필드를 모두 채운 결과."""
    return SummaryOut(
        food=FAILURE_MESSAGE,
        water=FAILURE_MESSAGE,
        exercise=FAILURE_MESSAGE,
        bowel=FAILURE_MESSAGE,
        special=FAILURE_MESSAGE,
        comment=f"{FAILURE_MESSAGE}\n오류 메시지: {err}\n\nAPI 키를 확인하거나 나중에 다시 시도해주세요.",
    )


def no_data_summary() -> SummaryOut:
    return SummaryOut(
        food=NO_DATA_MESSAGE,
        water=NO_DATA_MESSAGE,
        exercise=NO_DATA_MESSAGE,
        bowel=NO_DATA_MESSAGE,
        special=NO_DATA_MESSAGE,
        comment=NO_DATA_COMMENT,
    )


def _count_blocks(text: str) -> int:
    return len([b for b in text.split("\n\n") if b.strip()])


def _previous_period(req: SummaryIn) -> Tuple[Optional[SessionInfo], Optional[str]]:
    # 이전 차수는 (세션 정보, 기록 텍스트) 한 묶음으로만 취급
    texts = req.previousSymptomTexts
    if not (texts or "").strip() and req.previousSymptomRecords:
        texts = format_records(req.previousSymptomRecords)
    has_texts = bool((texts or "").strip())
    has_info = req.previousSessionInfo is not None

    if has_info and has_texts:
        return req.previousSessionInfo, texts
    if has_info or has_texts:
        log.warning("Previous period is incomplete (session info / texts); ignoring comparison data")
    return None, None


def prepare_summary_prompt(req: SummaryIn) -> Optional[str]:
    """
    요청 검증 + 프롬프트 생성.
    - 필수값 누락 시 ValueError
    - 구조화 기록만 있고 직접 입력 텍스트가 전혀 없으면 None (AI 호출 생략)
    """
    texts = (req.symptomTexts or "").strip()
    records = req.symptomRecords or []
    if req.userProfile is None or (not texts and not records):
        raise ValueError(MISSING_INPUT)

    if not texts:
        if not has_user_input_text(records):
            return None
        texts = format_records(records)

    if req.recordCount is not None:
        record_count = req.recordCount
    elif records:
        record_count = len(records)
    else:
        record_count = _count_blocks(texts)

    prev_session, prev_texts = _previous_period(req)
    return build_summary_prompt(
        req.userProfile,
        texts,
        record_count,
        req.currentSessionInfo,
        previous_session=prev_session,
        previous_symptom_texts=prev_texts,
    )


async def summarize(req: SummaryIn) -> SummaryOut:
    """프롬프트 생성 → 외부 호출 1회 → 구분자 파싱. LLMError 는 호출자에서 처리."""
    prompt = prepare_summary_prompt(req)
    if prompt is None:
        log.info("No free-text input in records; returning guidance message without LLM call")
        return no_data_summary()

    reply = await run_in_threadpool(
        generate_text, prompt, settings.SUMMARY_MODEL, settings.SUMMARY_MAX_TOKENS
    )
    return SummaryOut(**parse_summary(reply))


async def analyze_trend(req: TrendIn) -> TrendOut:
    if not req.records:
        raise ValueError(MISSING_INPUT)

    prompt = build_trend_prompt(
        req.records,
        food_labels=req.foodLabelMap,
        water_labels=req.waterLabelMap,
        exercise_labels=req.exerciseLabelMap,
    )
    reply = await run_in_threadpool(
        generate_text, prompt, settings.TREND_MODEL, settings.TREND_MAX_TOKENS
    )
    return TrendOut(**parse_trend(reply))
