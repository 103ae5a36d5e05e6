from types import SimpleNamespace
from unittest.mock import patch

import anthropic
import httpx
import pytest

from app.services.llm_client import LLMError, generate_text


def _message(*blocks):
    return SimpleNamespace(content=list(blocks))


def _text(text):
    return SimpleNamespace(type="text", text=text)


def test_missing_api_key():
    with pytest.raises(LLMError):
        generate_text("hi", "model", 10, api_key="")


@patch("app.services.llm_client.Anthropic")
def test_returns_first_text_block(mock_cls):
    create = mock_cls.return_value.messages.create
    create.return_value = _message(SimpleNamespace(type="tool_use"), _text("===food===\nA"))

    out = generate_text("prompt", "claude-test", 100, api_key="k")
    assert out == "===food===\nA"

    assert mock_cls.call_args.kwargs["api_key"] == "k"
    assert mock_cls.call_args.kwargs["max_retries"] == 0
    kwargs = create.call_args.kwargs
    assert kwargs["model"] == "claude-test"
    assert kwargs["max_tokens"] == 100
    assert kwargs["messages"] == [{"role": "user", "content": "prompt"}]


@patch("app.services.llm_client.Anthropic")
def test_api_error_is_wrapped(mock_cls):
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    mock_cls.return_value.messages.create.side_effect = anthropic.APIConnectionError(request=request)
    with pytest.raises(LLMError):
        generate_text("prompt", "m", 10, api_key="k")


@patch("app.services.llm_client.Anthropic")
def test_reply_without_text(mock_cls):
    mock_cls.return_value.messages.create.return_value = _message()
    with pytest.raises(LLMError):
        generate_text("prompt", "m", 10, api_key="k")
