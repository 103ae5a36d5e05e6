# app/prompts/summary_prompt.py
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from app.schemas.request_schema import PatientProfile, SessionInfo

NOT_AVAILABLE = "정보 없음"
NOT_ENTERED = "미입력"
GENDER_LABELS = {"male": "남성", "female": "여성"}

COMPARISON_MARKER = "[이전 차수 대비]"


class Section(NamedTuple):
    field: str                  # 응답 JSON 키
    marker: str                 # ===marker===
    aliases: Tuple[str, ...]    # 영문 표기 등 허용 마커
    title: str
    focus: str


ANALYSIS_SECTIONS = (
    Section("food", "식사량", ("food",), "식사량",
            "아침/점심/저녁/기타 시간대별 식사 내용과 섭취량 변화, 영양 균형"),
    Section("water", "음수량", ("water",), "음수량",
            "하루 음수량과 음료 종류, 수분 섭취가 충분한지"),
    Section("exercise", "운동량", ("exercise",), "운동량",
            "걸음 수와 운동 내용, 활동량 추이"),
    Section("bowel", "배변", ("bowel",), "배변",
            "배변 유무와 변 상태(설사, 변비 등) 패턴"),
    Section("special", "특이사항", ("special",), "특이사항",
            "주요 부작용과 상세 증상 중 의료진이 주의 깊게 볼 점"),
)
COMMENT_SECTION = Section(
    "comment", "AI코멘트", ("AIcomment",), "AI 코멘트",
    "나이, 진단명, 증상을 종합해 항암치료 중 정상 반응인지 과한 부분이 있는지 평가하고 격려와 실질적인 조언 제공",
)
SUMMARY_SECTIONS = ANALYSIS_SECTIONS + (COMMENT_SECTION,)


@dataclass(frozen=True)
class LineLimits:
    single: int = 3        # 이전 차수 없음: 항목당 최대 줄 수
    current: int = 2       # 이전 차수 있음: 현재 상태 줄 수
    comparison: int = 1    # 이전 차수 있음: 비교 줄 수
    comment: int = 4       # AI 코멘트 최대 줄 수


DEFAULT_LIMITS = LineLimits()


SUMMARY_TMPL = (
"당신은 의료진에게 환자의 항암치료 경과를 전달하는 의료 보조 AI입니다.\n\n"
"**환자 정보:** {patient_line}\n\n"
"**{current_label} 증상 기록 (총 {record_count}건):**\n"
"{symptom_texts}\n\n"
"{previous_block}"
"**작성 규칙:**\n"
"{rules}\n\n"
"**분석 항목:**\n"
"{sections}\n\n"
"**응답 형식 (반드시 이 형식을 따라주세요):**\n"
"{response_format}"
)

PREVIOUS_TMPL = (
"**이전 차수 {previous_label} 증상 기록:**\n"
"{previous_texts}\n\n"
)


def _session_label(s: Optional[SessionInfo]) -> str:
    if s is None:
        return NOT_AVAILABLE
    label = " ".join(x for x in (s.cycle, s.session) if x)
    return label or NOT_AVAILABLE


def patient_line(profile: Optional[PatientProfile]) -> str:
    p = profile or PatientProfile()
    age = f"{p.age}세" if p.age else NOT_AVAILABLE
    gender = GENDER_LABELS.get((p.gender or "").lower(), NOT_AVAILABLE)
    disease = p.disease or NOT_ENTERED
    diagnosis_date = p.diagnosisDate or NOT_ENTERED
    return f"나이 {age}, 성별 {gender}, 진단명 {disease}, 최초 진단일 {diagnosis_date}"


def _rules(has_previous: bool, limits: LineLimits) -> str:
    if has_previous:
        total = limits.current + limits.comparison
        rules = [
            f"- 각 분석 항목은 최대 {total}줄로 작성하세요.",
            f"- 앞의 {limits.current}줄은 이번 차수의 현재 상태를 요약하세요.",
            f"- 마지막 {limits.comparison}줄은 \"{COMPARISON_MARKER}\"로 시작해 이전 차수와 비교한 변화를 적으세요.",
        ]
    else:
        rules = [f"- 각 분석 항목은 최대 {limits.single}줄로 작성하세요."]
    rules += [
        f"- AI 코멘트는 최대 {limits.comment}줄로 작성하세요.",
        "- 기록에 없는 내용은 추측하지 말고, 주의가 필요한 증상은 분명하게 표현하세요.",
    ]
    return "\n".join(rules)


def _section_list(has_previous: bool) -> str:
    out = []
    for i, s in enumerate(ANALYSIS_SECTIONS, start=1):
        line = f"{i}. {s.title}: {s.focus}"
        if has_previous:
            line += f" ({COMPARISON_MARKER} 비교 포함)"
        out.append(line)
    out.append(f"{len(ANALYSIS_SECTIONS) + 1}. {COMMENT_SECTION.title}: {COMMENT_SECTION.focus}")
    return "\n".join(out)


def _response_format(has_previous: bool, limits: LineLimits) -> str:
    if has_previous:
        hint = f"[현재 상태 {limits.current}줄 + {COMPARISON_MARKER} {limits.comparison}줄]"
    else:
        hint = f"[최대 {limits.single}줄]"
    blocks = [f"==={s.marker}===\n{hint}" for s in ANALYSIS_SECTIONS]
    blocks.append(f"==={COMMENT_SECTION.marker}===\n[최대 {limits.comment}줄]")
    return "\n\n".join(blocks)


def build_summary_prompt(
    profile: Optional[PatientProfile],
    symptom_texts: str,
    record_count: Optional[int],
    current_session: Optional[SessionInfo],
    previous_session: Optional[SessionInfo] = None,
    previous_symptom_texts: Optional[str] = None,
    limits: LineLimits = DEFAULT_LIMITS,
) -> str:
    """
    의료진 전달용 요약 프롬프트 생성 (순수 함수).
    - 이전 차수 정보(previous_session, previous_symptom_texts)는 둘 다 있을 때만 비교 모드
    - 응답은 항상 ===마커=== 6개 형식으로 요청
    """
    has_previous = previous_session is not None and bool((previous_symptom_texts or "").strip())

    previous_block = ""
    if has_previous:
        previous_block = PREVIOUS_TMPL.format(
            previous_label=_session_label(previous_session),
            previous_texts=previous_symptom_texts,
        )

    count = record_count if record_count is not None else NOT_AVAILABLE
    return SUMMARY_TMPL.format(
        patient_line=patient_line(profile),
        current_label=_session_label(current_session),
        record_count=count,
        symptom_texts=symptom_texts or "",
        previous_block=previous_block,
        rules=_rules(has_previous, limits),
        sections=_section_list(has_previous),
        response_format=_response_format(has_previous, limits),
    )
