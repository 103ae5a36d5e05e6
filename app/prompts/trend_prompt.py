# app/prompts/trend_prompt.py
from typing import Dict, List, Optional

from app.prompts.summary_prompt import Section
from app.schemas.request_schema import DailyRecord

NOT_RECORDED = "미기록"

# 앱 기본 라벨 (요청에 라벨 맵이 없을 때 사용)
FOOD_LABELS = {
    "0": "섭취 안함",
    "25": "평소의 1/4 정도",
    "50": "평소의 50%",
    "75": "평소의 75%",
    "100": "평소만큼",
}
WATER_LABELS = {
    "500": "500ml 이하",
    "1000": "500~1000ml",
    "1500": "1000~1500ml",
    "2000": "1500~2000ml",
    "2500": "2000ml 이상",
}
EXERCISE_LABELS = {
    "0": "0보",
    "500": "1천보 미만",
    "1500": "1천~2천보",
    "3000": "2천~5천보",
    "7500": "5천~1만보",
    "10000": "1만보 이상",
}

TREND_SECTIONS = (
    Section("food", "식사량", (), "식사량", "식사량 선택값과 메뉴의 영양 균형"),
    Section("water", "음수량", (), "음수량", "음수량과 음료 종류"),
    Section("exercise", "운동량", (), "운동량", "걸음 수와 운동 내용"),
    Section("sideEffect", "부작용", (), "부작용", "부작용 빈도"),
)
TREND_ICONS = {"food": "📊", "water": "💧", "exercise": "🚶", "sideEffect": "⚠️"}


TREND_TMPL = (
"다음은 항암치료 환자의 일별 기록입니다:\n\n"
"{data_text}\n\n"
"**중요: 분석 시 주의사항**\n"
"- 각 기록의 괄호 안에 있는 사용자의 텍스트 입력(식사 메뉴, 음료 종류, 운동 내용 등)을 반드시 분석에 참고하세요\n"
"- 식사량 선택값뿐 아니라 괄호 안의 구체적 메뉴를 보고 영양 균형을 평가하세요\n"
"- 음수량 괄호 내용(물, 이온음료, 보리차 등)을 확인하여 수분 섭취의 질을 평가하세요\n"
"- 운동량 괄호 내용(산책, 스트레칭 등)을 확인하여 운동 패턴의 적절성을 평가하세요\n\n"
"**요청사항:**\n"
"위 데이터를 분석하여 각 항목별로 빈도 기반 추이와 사용자가 입력한 구체적 내용의 질적 분석을 함께 제공해주세요.\n\n"
"다음 형식으로 정확히 응답해주세요:\n"
"{response_format}\n\n"
"**주의사항:**\n"
"- 빈도가 높은 순서대로 나열\n"
"- 각 평가는 한 줄로 간결하게\n"
"- 이모지와 불릿 포인트(•) 사용\n"
"- 이스케이프 문자 사용 금지"
)

SECTION_TMPL = (
"==={marker}===\n"
"{icon} {title} 분석 (총 {days}일)\n\n"
"• [{item}]: [빈도]{unit}\n"
"• [{item}]: [빈도]{unit}\n"
"({order})\n\n"
"➡️ [전체 추세 평가]\n"
"[의료진 상담 필요 여부]"
)


def _label(labels: Dict[str, str], value) -> str:
    if value is None:
        return NOT_RECORDED
    return labels.get(str(value).strip(), NOT_RECORDED)


def _note(v: Optional[str]) -> str:
    s = (v or "").strip()
    return f" ({s})" if s else ""


def trend_day_line(
    idx: int,
    r: DailyRecord,
    food_labels: Dict[str, str],
    water_labels: Dict[str, str],
    exercise_labels: Dict[str, str],
) -> str:
    food = _label(food_labels, r.foodIntakeLevel) + _note(r.foodIntakeNote)
    water = _label(water_labels, r.waterIntakeAmount) + _note(r.waterIntakeNote)
    exercise = _label(exercise_labels, r.exerciseTime) + _note(r.exerciseNote)
    side = ", ".join(r.sideEffects)
    return f"{idx}일차: 식사[{food}], 음수[{water}], 운동[{exercise}], 부작용[{side}]"


def build_trend_prompt(
    records: List[DailyRecord],
    food_labels: Optional[Dict[str, str]] = None,
    water_labels: Optional[Dict[str, str]] = None,
    exercise_labels: Optional[Dict[str, str]] = None,
) -> str:
    food_labels = food_labels or FOOD_LABELS
    water_labels = water_labels or WATER_LABELS
    exercise_labels = exercise_labels or EXERCISE_LABELS

    data_text = "\n".join(
        trend_day_line(i, r, food_labels, water_labels, exercise_labels)
        for i, r in enumerate(records, start=1)
    )

    blocks = []
    for s in TREND_SECTIONS:
        side = s.field == "sideEffect"
        blocks.append(SECTION_TMPL.format(
            marker=s.marker,
            icon=TREND_ICONS[s.field],
            title=s.title,
            days=len(records),
            item="부작용명" if side else "라벨",
            unit="회" if side else "일",
            order="상위 5개만, 빈도 순으로 정렬" if side else "빈도 순으로 정렬",
        ))
    return TREND_TMPL.format(data_text=data_text, response_format="\n\n".join(blocks))
