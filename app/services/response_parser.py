# app/services/response_parser.py
from typing import Dict, Iterable, NamedTuple, Optional, Sequence, Tuple

from app.prompts.summary_prompt import ANALYSIS_SECTIONS, COMMENT_SECTION, Section
from app.prompts.trend_prompt import TREND_SECTIONS

DELIM = "==="

ANALYSIS_DEFAULT = "분석 결과를 생성할 수 없습니다."
COMMENT_DEFAULT = "코멘트를 생성할 수 없습니다."

TREND_DEFAULTS = {
    "food": "식사량 추이를 분석할 수 없습니다.",
    "water": "음수량 추이를 분석할 수 없습니다.",
    "exercise": "운동량 추이를 분석할 수 없습니다.",
    "sideEffect": "부작용 추이를 분석할 수 없습니다.",
}


class SectionSpec(NamedTuple):
    field: str
    markers: Tuple[str, ...]
    default: str


def _spec(s: Section, default: str) -> SectionSpec:
    return SectionSpec(s.field, (s.marker,) + tuple(s.aliases), default)


SUMMARY_SPECS = tuple(_spec(s, ANALYSIS_DEFAULT) for s in ANALYSIS_SECTIONS) + (
    _spec(COMMENT_SECTION, COMMENT_DEFAULT),
)
TREND_SPECS = tuple(_spec(s, TREND_DEFAULTS[s.field]) for s in TREND_SECTIONS)


def _find_marker(text: str, markers: Iterable[str]) -> Optional[Tuple[int, int]]:
    """가장 앞에 나오는 ===marker=== 의 (시작, 끝) 위치."""
    best = None
    for m in markers:
        token = f"{DELIM}{m}{DELIM}"
        i = text.find(token)
        if i >= 0 and (best is None or i < best[0]):
            best = (i, i + len(token))
    return best


def extract_section(text: str, markers: Iterable[str]) -> str:
    """마커 바로 뒤부터 다음 '===' 또는 끝까지 잘라서 trim. 없으면 빈 문자열."""
    pos = _find_marker(text, markers)
    if pos is None:
        return ""
    start = pos[1]
    end = text.find(DELIM, start)
    if end < 0:
        end = len(text)
    return text[start:end].strip()


def parse_sections(text, specs: Sequence[SectionSpec]) -> Dict[str, str]:
    """
    구분자(===NAME===) 기반 응답 파싱.
    - 어떤 입력이 와도 specs 의 모든 키를 채워서 반환 (예외 없음)
    - 섹션 순서가 바뀌거나 일부가 빠져도 키별로 기본 문구로 대체
    """
    if not isinstance(text, str):
        text = ""
    out = {}
    for spec in specs:
        out[spec.field] = extract_section(text, spec.markers) or spec.default
    return out


def parse_summary(text) -> Dict[str, str]:
    return parse_sections(text, SUMMARY_SPECS)


def parse_trend(text) -> Dict[str, str]:
    return parse_sections(text, TREND_SPECS)
