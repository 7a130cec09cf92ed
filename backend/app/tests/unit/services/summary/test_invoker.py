"""Test the summarization call."""

from unittest.mock import MagicMock

import pytest

from src.llm.base_llm import BaseLLM
from src.llm.message import ContentPart, Message
from src.llm.prompt_loader import PromptLoader
from src.models.errors import SummaryGenerationFailed
from src.services.summary.invoker import SummaryInvoker

TEMPLATE_SECTIONS = (
    "# Project Overview",
    "# Conversation Context",
    "# Implementation Status",
    "# Requirements",
    "# Critical Memory",
    "# Next Actions",
)


@pytest.fixture()
def generator() -> MagicMock:
    llm = MagicMock(spec=BaseLLM)
    llm.model = "fake-model"
    llm.generate.return_value = "# Project Overview\n- **Project**: demo"
    return llm


def test_system_prompt_contains_every_template_section() -> None:
    prompt = SummaryInvoker().system_prompt

    for section in TEMPLATE_SECTIONS:
        assert section in prompt


def test_messages_are_sent_as_role_and_plain_text(generator: MagicMock) -> None:
    messages = [
        Message(id="1", role="user", content="hi"),
        Message(id="2", role="system", content=[ContentPart(type="text", text="be brief")]),
    ]

    result = SummaryInvoker().invoke(messages, generator, anchor_id="2")

    system, payload = generator.generate.call_args.args
    assert "# Critical Memory" in system
    assert payload == [
        {"role": "user", "content": "hi"},
        {"role": "system", "content": "be brief"},
    ]
    assert result.summary == "# Project Overview\n- **Project**: demo"
    assert result.chat_id == "2"


def test_model_output_is_passed_through_unchanged(generator: MagicMock) -> None:
    generator.generate.return_value = "  not the template at all \n"

    result = SummaryInvoker().invoke([], generator, anchor_id=None)

    assert result.summary == "  not the template at all \n"
    assert result.chat_id is None


def test_generation_errors_are_hidden(generator: MagicMock) -> None:
    generator.generate.side_effect = ConnectionError("quota exceeded for key sk-123")

    with pytest.raises(SummaryGenerationFailed) as exc_info:
        SummaryInvoker().invoke([Message(id="1", role="user", content="hi")], generator, "1")

    assert str(exc_info.value) == "Summary generation failed"
    assert "sk-123" not in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, ConnectionError)


def test_missing_prompt_file_raises(tmp_path) -> None:
    loader = PromptLoader(base_dir=tmp_path)

    with pytest.raises(FileNotFoundError):
        loader.get_system_prompt("summary")


def test_prompt_loader_reads_custom_directory(tmp_path) -> None:
    (tmp_path / "summary_prompt.toml").write_text('system = """\n  Custom prompt\n"""\n')

    invoker = SummaryInvoker(PromptLoader(base_dir=tmp_path))

    assert invoker.system_prompt == "Custom prompt"
