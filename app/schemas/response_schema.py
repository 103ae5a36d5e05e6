from pydantic import BaseModel


class SummaryOut(BaseModel):
    food: str
    water: str
    exercise: str
    bowel: str
    special: str
    comment: str


class TrendOut(BaseModel):
    food: str
    water: str
    exercise: str
    sideEffect: str
