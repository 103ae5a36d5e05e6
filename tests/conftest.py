import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.schemas.request_schema import DailyRecord, PatientProfile, SessionInfo


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def profile():
    return PatientProfile(age=58, gender="female", disease="유방암", diagnosisDate="2024-01-10")


@pytest.fixture
def current_session():
    return SessionInfo(cycle="2차", session="1회차")


@pytest.fixture
def record():
    return DailyRecord(
        date="2024-03-01",
        chemoCycle="1차",
        chemoSession="2회차",
        chemoDay="3일차",
        foodIntakeLevel=75,
        waterIntakeAmount=1000,
        waterIntakeNote="보리차",
        exerciseTime=3000,
        bowelMovement="yes",
        bowelCondition=["설사", "복통"],
        sideEffects=["오심", "피로"],
        symptoms="입맛 없음",
    )


@pytest.fixture
def fake_llm(monkeypatch):
    """summary_service 의 외부 호출을 가로채서 프롬프트를 기록하고 정해진 응답을 돌려준다."""
    calls = []

    class _Fake:
        reply = ""
        error = None

        def __call__(self, prompt, model, max_tokens):
            calls.append({"prompt": prompt, "model": model, "max_tokens": max_tokens})
            if self.error is not None:
                raise self.error
            return self.reply

    fake = _Fake()
    fake.calls = calls
    monkeypatch.setattr("app.services.summary_service.generate_text", fake)
    return fake
