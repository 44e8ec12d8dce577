import pytest

from script_writer.agent import ScriptWriterAgent
from script_writer.model_manager import GenerationError
from script_writer.state import ScriptState
from tests.conftest import FakeModelManager, make_reply


def test_first_message_asks_for_hook(writer_config):
    agent = ScriptWriterAgent(FakeModelManager([]), writer_config)
    messages = agent.build_messages(ScriptState.initial("Foxes", 500))

    assert messages[0]["role"] == "system"
    user = messages[1]["content"]
    assert "first part" in user
    assert "Topic: Foxes" in user
    assert "*** WORDS REMAINING: 500 *** (ABSOLUTE LIMIT!)" in user
    assert "This is the beginning of the script." in user
    assert "hook" in user
    assert "Summary So Far" not in user


def test_next_message_carries_summary(writer_config):
    agent = ScriptWriterAgent(FakeModelManager([]), writer_config)
    state = ScriptState(topic="Foxes", max_words=500, word_count=120, word_remaining=380,
                        summary="The fox met a crow. ")
    user = agent.build_messages(state)[1]["content"]

    assert "next part" in user
    assert "Current Word Count: 120" in user
    assert "Summary So Far: The fox met a crow." in user
    assert "Continue naturally" in user


def test_write_continuation_parses_reply(writer_config):
    manager = FakeModelManager([make_reply(5, completed=True, script_type="hook")])
    agent = ScriptWriterAgent(manager, writer_config)

    reply = agent.write_continuation(ScriptState.initial("Foxes", 500))

    assert reply.continuation == "w0 w1 w2 w3 w4"
    assert reply.completed is True
    assert reply.script_type == "hook"
    assert len(manager.calls) == 1


@pytest.mark.parametrize("raw", [
    "not json at all",
    '{"continuation": "text"}',
    '{"continuation": "t", "continuation_summary": "s", "completed": false, "script_type": "outro"}',
])
def test_parse_response_rejects_malformed_replies(raw):
    with pytest.raises(GenerationError):
        ScriptWriterAgent.parse_response(raw)


def test_script_type_is_optional():
    reply = ScriptWriterAgent.parse_response(
        '{"continuation": "t", "continuation_summary": "s", "completed": false}'
    )
    assert reply.script_type is None
