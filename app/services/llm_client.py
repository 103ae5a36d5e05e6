# app/services/llm_client.py
import logging
from typing import Optional

import anthropic
from anthropic import Anthropic

from app.core.config import settings

log = logging.getLogger(__name__)


class LLMError(Exception):
    """외부 텍스트 생성 API 호출 실패 (키 누락, 네트워크, 비정상 응답)."""


def generate_text(prompt: str, model: str, max_tokens: int, api_key: Optional[str] = None) -> str:
    """
    Anthropic Messages API 한 번 호출 후 첫 텍스트 블록 반환.
    재시도 없음. 실패는 모두 LLMError 로 올린다.
    """
    key = api_key if api_key is not None else settings.ANTHROPIC_API_KEY
    if not key:
        raise LLMError("ANTHROPIC_API_KEY가 설정되지 않았습니다.")

    client = Anthropic(api_key=key, timeout=settings.LLM_TIMEOUT, max_retries=0)

    log.info(f"LLM request: model={model}, max_tokens={max_tokens}, prompt_len={len(prompt)}")
    try:
        message = client.messages.create(
            model=model,
            max_tokens=max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
    except anthropic.APIError as e:
        raise LLMError(f"LLM 호출 실패: {e}") from e

    for block in message.content or []:
        if getattr(block, "type", None) == "text":
            log.debug(f"LLM response_len={len(block.text)}")
            return block.text
    raise LLMError("LLM 응답에 텍스트 블록이 없습니다.")
