from app.prompts.trend_prompt import build_trend_prompt
from app.schemas.request_schema import DailyRecord
from app.services.llm_client import LLMError
from app.services.response_parser import TREND_DEFAULTS

RECORDS = [
    {"foodIntakeLevel": "50", "foodIntakeNote": "죽", "waterIntakeAmount": "1000", "exerciseTime": "1500",
     "sideEffects": ["오심", "피로"]},
    {"foodIntakeLevel": "100", "waterIntakeAmount": "9999", "sideEffects": []},
]


def test_trend_prompt_day_lines():
    prompt = build_trend_prompt([DailyRecord(**r) for r in RECORDS])
    assert "1일차: 식사[평소의 50% (죽)], 음수[500~1000ml], 운동[1천~2천보], 부작용[오심, 피로]" in prompt
    assert "2일차: 식사[평소만큼], 음수[미기록], 운동[미기록], 부작용[]" in prompt
    for marker in ("===식사량===", "===음수량===", "===운동량===", "===부작용==="):
        assert marker in prompt
    assert "(총 2일)" in prompt


def test_trend_prompt_custom_labels():
    prompt = build_trend_prompt([DailyRecord(foodIntakeLevel="50")], food_labels={"50": "절반"})
    assert "식사[절반]" in prompt


def test_trend_analysis_success(client, fake_llm):
    fake_llm.reply = "===식사량===\n📊 식사량 분석\n===음수량===\n💧 충분\n===운동량===\n🚶 부족\n===부작용===\n⚠️ 오심 1회"
    r = client.post("/api/trend-analysis", json={"records": RECORDS})
    assert r.status_code == 200
    assert r.json() == {
        "food": "📊 식사량 분석",
        "water": "💧 충분",
        "exercise": "🚶 부족",
        "sideEffect": "⚠️ 오심 1회",
    }


def test_trend_analysis_missing_sections(client, fake_llm):
    fake_llm.reply = "형식 없음"
    r = client.post("/api/trend-analysis", json={"records": RECORDS})
    assert r.json() == TREND_DEFAULTS


def test_trend_analysis_empty_records(client, fake_llm):
    r = client.post("/api/trend-analysis", json={"records": []})
    assert r.status_code == 400
    assert fake_llm.calls == []


def test_trend_analysis_provider_failure(client, fake_llm):
    fake_llm.error = LLMError("timeout")
    r = client.post("/api/trend-analysis", json={"records": RECORDS})
    assert r.status_code == 502
    assert r.json()["details"] == "timeout"
