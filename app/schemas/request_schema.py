# app/schemas/request_schema.py
from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional


class PatientProfile(BaseModel):
    age: Optional[int] = Field(None, description="만 나이 (양의 정수)")
    gender: Optional[str] = Field(None, description="male / female / 기타")
    disease: Optional[str] = Field(None, description="진단명")
    diagnosisDate: Optional[str] = Field(None, description="최초 진단일")

    @field_validator("age", mode="before")
    @classmethod
    def to_positive_int(cls, v):
        # 숫자로 못 바꾸거나 0 이하이면 '정보 없음' 처리
        if v is None or isinstance(v, bool):
            return None
        try:
            n = int(float(str(v).strip()))
        except (TypeError, ValueError, OverflowError):
            return None
        return n if n > 0 else None

    @field_validator("gender", "disease", "diagnosisDate", mode="before")
    @classmethod
    def to_text(cls, v):
        if v is None:
            return None
        s = str(v).strip()
        return s or None


class SessionInfo(BaseModel):
    cycle: str = Field("", description="항암 진행 차수 (예: 1차)")
    session: str = Field("", description="항암 회차 (예: 2회차)")

    @field_validator("cycle", "session", mode="before")
    @classmethod
    def to_str(cls, v):
        return "" if v is None else str(v).strip()


class DailyRecord(BaseModel):
    date: Optional[str] = None
    chemoCycle: Optional[str] = None
    chemoSession: Optional[str] = None
    chemoDay: Optional[str] = None

    foodIntakeLevel: Optional[Any] = None
    foodIntakeNote: Optional[str] = None
    foodIntakeBreakfast: Optional[str] = None
    foodIntakeLunch: Optional[str] = None
    foodIntakeDinner: Optional[str] = None
    foodIntakeOther: Optional[str] = None

    waterIntakeAmount: Optional[Any] = None
    waterIntakeNote: Optional[str] = None

    exerciseTime: Optional[Any] = None
    exerciseNote: Optional[str] = None

    bowelMovement: Optional[str] = None
    bowelCondition: List[str] = Field(default_factory=list)

    sideEffects: List[str] = Field(default_factory=list)
    symptoms: Optional[str] = None

    @field_validator(
        "date", "chemoCycle", "chemoSession", "chemoDay",
        "foodIntakeNote", "foodIntakeBreakfast", "foodIntakeLunch", "foodIntakeDinner", "foodIntakeOther",
        "waterIntakeNote", "exerciseNote", "bowelMovement", "symptoms",
        mode="before",
    )
    @classmethod
    def to_text(cls, v):
        return None if v is None else str(v)

    @field_validator("bowelCondition", "sideEffects", mode="before")
    @classmethod
    def to_list(cls, v):
        if v is None:
            return []
        if isinstance(v, dict):
            raise ValueError("list of strings expected")
        if not isinstance(v, (list, tuple, set)):
            v = [v]
        # None / 빈 문자열 태그는 버림
        return [str(x).strip() for x in v if x is not None and str(x).strip()]


class SummaryIn(BaseModel):
    """
    의료진 전달 요약 요청.
    - symptomTexts: 이미 포맷된 기록 텍스트
    - symptomRecords: 구조화된 기록 (서버에서 텍스트로 포맷)
    둘 중 하나는 있어야 한다.
    """
    userProfile: Optional[PatientProfile] = None
    symptomTexts: Optional[str] = None
    symptomRecords: Optional[List[DailyRecord]] = None
    recordCount: Optional[int] = None
    currentSessionInfo: SessionInfo = Field(default_factory=SessionInfo)
    previousSessionInfo: Optional[SessionInfo] = None
    previousSymptomTexts: Optional[str] = None
    previousSymptomRecords: Optional[List[DailyRecord]] = None


class TrendIn(BaseModel):
    records: List[DailyRecord] = Field(default_factory=list)
    foodLabelMap: Dict[str, str] = Field(default_factory=dict)
    waterLabelMap: Dict[str, str] = Field(default_factory=dict)
    exerciseLabelMap: Dict[str, str] = Field(default_factory=dict)
