from app.schemas.request_schema import DailyRecord
from app.services.record_formatter import format_record, format_records, has_user_input_text


def test_format_record_layout(record):
    assert format_record(record) == (
        "[2024-03-01]\n"
        "- 항암 진행: 1차 2회차 3일차\n"
        "- 식사량: 75%\n"
        "- 음수량: 약 1000ml (보리차)\n"
        "- 운동량: 약 3000보\n"
        "- 배변: 있음 (설사, 복통)\n"
        "- 주요 부작용: 오심, 피로\n"
        "- 상세 증상: 입맛 없음"
    )


def test_food_note_fallback(record):
    record.foodIntakeNote = "죽 반 그릇"
    assert "- 식사량: 75% (죽 반 그릇)" in format_record(record)


def test_meal_details_take_precedence(record):
    record.foodIntakeNote = "예전 메모"
    record.foodIntakeBreakfast = "죽"
    record.foodIntakeLunch = "미역국"
    record.foodIntakeOther = "바나나"
    text = format_record(record)
    assert "- 식사량: 75% (아침: 죽, 점심: 미역국, 기타: 바나나)" in text
    assert "예전 메모" not in text


def test_bowel_no_and_empty_lists():
    text = format_record(DailyRecord(date="2024-03-02", bowelMovement="no"))
    assert "- 배변: 없음\n" in text
    assert "- 주요 부작용: \n" in text
    assert text.endswith("- 상세 증상: ")


def test_numeric_fields_accept_strings_and_numbers():
    r = DailyRecord(chemoCycle=1, foodIntakeLevel="50", waterIntakeAmount="1500")
    text = format_record(r)
    assert "- 항암 진행: 1  " in text
    assert "- 식사량: 50%" in text
    assert "- 음수량: 약 1500ml" in text


def test_format_records_blank_line_separator(record):
    second = record.model_copy(update={"date": "2024-03-02"})
    text = format_records([record, second])
    blocks = text.split("\n\n")
    assert len(blocks) == 2
    assert blocks[0].startswith("[2024-03-01]")
    assert blocks[1].startswith("[2024-03-02]")


def test_has_user_input_text():
    assert not has_user_input_text([DailyRecord(foodIntakeLevel=50, sideEffects=["오심"])])
    assert not has_user_input_text([DailyRecord(symptoms="   ")])
    assert has_user_input_text([DailyRecord(), DailyRecord(exerciseNote="산책")])
    assert has_user_input_text([DailyRecord(foodIntakeDinner="죽")])


def test_tag_lists_coerce_scalars_and_drop_empty_entries():
    r = DailyRecord(sideEffects=3, bowelCondition=["설사", None, "  ", "복통"])
    assert r.sideEffects == ["3"]
    assert r.bowelCondition == ["설사", "복통"]
    text = format_record(DailyRecord(bowelMovement="yes", bowelCondition=[None], sideEffects=["오심", None]))
    assert "- 배변: 있음\n" in text
    assert "- 주요 부작용: 오심\n" in text
    assert "None" not in text
