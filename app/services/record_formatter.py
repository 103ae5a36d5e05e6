# app/services/record_formatter.py
import json
from typing import Iterable, List

from app.schemas.request_schema import DailyRecord

# 식사 시간대 라벨 (프롬프트가 이 순서/라벨을 기준으로 시간대별 분석을 요청함)
MEAL_LABELS = (
    ("foodIntakeBreakfast", "아침"),
    ("foodIntakeLunch", "점심"),
    ("foodIntakeDinner", "저녁"),
    ("foodIntakeOther", "기타"),
)


def _to_text(v) -> str:
    """입력 어떤 타입이 와도 문자열로 정규화."""
    if isinstance(v, str):
        return v.strip()
    if v is None:
        return ""
    if isinstance(v, (int, float, bool)):
        return str(v)
    if isinstance(v, (list, tuple)):
        return ", ".join(str(x).strip() for x in v).strip()
    try:
        return json.dumps(v, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(v)


def _paren(note) -> str:
    s = _to_text(note)
    return f" ({s})" if s else ""


def _food_details(r: DailyRecord) -> str:
    # 시간대별 입력이 하나라도 있으면 그것을 우선, 없으면 예전 단일 메모
    meals = []
    for attr, label in MEAL_LABELS:
        v = _to_text(getattr(r, attr))
        if v:
            meals.append(f"{label}: {v}")
    if meals:
        return f" ({', '.join(meals)})"
    return _paren(r.foodIntakeNote)


def format_record(r: DailyRecord) -> str:
    bowel = "있음" if _to_text(r.bowelMovement) == "yes" else "없음"
    progress = " ".join([_to_text(r.chemoCycle), _to_text(r.chemoSession), _to_text(r.chemoDay)])
    lines = [
        f"[{_to_text(r.date)}]",
        f"- 항암 진행: {progress}",
        f"- 식사량: {_to_text(r.foodIntakeLevel)}%{_food_details(r)}",
        f"- 음수량: 약 {_to_text(r.waterIntakeAmount)}ml{_paren(r.waterIntakeNote)}",
        f"- 운동량: 약 {_to_text(r.exerciseTime)}보{_paren(r.exerciseNote)}",
        f"- 배변: {bowel}{_paren(r.bowelCondition)}",
        f"- 주요 부작용: {_to_text(r.sideEffects)}",
        f"- 상세 증상: {_to_text(r.symptoms)}",
    ]
    return "\n".join(lines)


def format_records(records: Iterable[DailyRecord]) -> str:
    return "\n\n".join(format_record(r) for r in records)


def has_user_input_text(records: List[DailyRecord]) -> bool:
    """식사(시간대별 포함)/음수/운동 메모나 상세 증상 중 직접 입력한 텍스트가 있는지."""
    for r in records:
        notes = [r.foodIntakeNote, r.waterIntakeNote, r.exerciseNote, r.symptoms]
        notes += [getattr(r, attr) for attr, _ in MEAL_LABELS]
        for v in notes:
            if _to_text(v):
                return True
    return False
