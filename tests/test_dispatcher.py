import pytest

from perplexity_core.catalog import TOOL_NAMES
from perplexity_core.client import CompletionClient
from perplexity_core.dispatcher import ToolDispatcher

from conftest import FakeOpener, completion_payload, http_error

MESSAGES = [{"role": "user", "content": "hi"}]


@pytest.fixture
def dispatcher(client):
    return ToolDispatcher(client)


def test_lists_all_three_tools(dispatcher):
    assert [spec.name for spec in dispatcher.list_tools()] == list(TOOL_NAMES)


def test_ask_scenario_request_body(dispatcher, opener):
    result = dispatcher.call_tool("perplexity_ask", {"messages": MESSAGES})

    assert result.to_dict() == {
        "content": [{"type": "text", "text": "The answer."}],
        "isError": False,
    }
    assert opener.last_body == {
        "model": "sonar-pro",
        "messages": MESSAGES,
        "search_context_size": "medium",
        "temperature": 0.2,
        "return_related_questions": False,
    }


@pytest.mark.parametrize("name, model", [
    ("perplexity_ask", "sonar-pro"),
    ("perplexity_research", "sonar-deep-research"),
    ("perplexity_reason", "sonar-reasoning-pro"),
])
def test_each_tool_uses_its_model(dispatcher, opener, name, model):
    dispatcher.call_tool(name, {"messages": MESSAGES})
    assert opener.last_body["model"] == model


def test_success_includes_composed_enrichment(settings):
    opener = FakeOpener(body=completion_payload("Answer", citations=["https://a"]))
    dispatcher = ToolDispatcher(CompletionClient(settings, opener=opener))

    result = dispatcher.call_tool("perplexity_research", {"messages": MESSAGES})

    assert not result.is_error
    assert result.text == "Answer\n\nCitations:\n[1] https://a\n"


def test_unknown_tool_makes_no_network_call(dispatcher, opener):
    result = dispatcher.call_tool("bogus", {"messages": MESSAGES})

    assert result.to_dict() == {
        "content": [{"type": "text", "text": "Unknown tool: bogus"}],
        "isError": True,
    }
    assert opener.requests == []


def test_invalid_messages_become_error_result(dispatcher, opener):
    result = dispatcher.call_tool("perplexity_reason", {"messages": "hi"})

    assert result.is_error
    assert result.text == "Error: Invalid arguments for perplexity_reason: 'messages' must be an array"
    assert opener.requests == []


def test_missing_arguments_become_error_result(dispatcher):
    result = dispatcher.call_tool("perplexity_ask", None)
    assert result.is_error
    assert result.text == "Error: No arguments provided"


def test_http_500_becomes_error_result(settings):
    opener = FakeOpener(error=http_error(500, "Internal Server Error", b"server error"))
    dispatcher = ToolDispatcher(CompletionClient(settings, opener=opener))

    result = dispatcher.call_tool("perplexity_ask", {"messages": MESSAGES})

    assert result.is_error
    assert result.text == "Error: Perplexity API error: 500 Internal Server Error\nserver error"
    assert len(opener.requests) == 1


def test_empty_choices_becomes_error_result(settings):
    dispatcher = ToolDispatcher(CompletionClient(settings, opener=FakeOpener(body={"choices": []})))

    result = dispatcher.call_tool("perplexity_ask", {"messages": MESSAGES})

    assert result.is_error
    assert "missing or empty choices array" in result.text
    assert result.text.startswith("Error: ")


def test_network_failure_becomes_error_result(settings):
    opener = FakeOpener(error=ConnectionResetError("reset by peer"))
    dispatcher = ToolDispatcher(CompletionClient(settings, opener=opener))

    result = dispatcher.call_tool("perplexity_ask", {"messages": MESSAGES})

    assert result.is_error
    assert result.text.startswith("Error: Network error while calling Perplexity API:")


def test_unexpected_exception_does_not_escape(settings):
    class ExplodingClient:
        def complete(self, body):
            raise RuntimeError("boom")

    result = ToolDispatcher(ExplodingClient()).call_tool("perplexity_ask", {"messages": MESSAGES})

    assert result.is_error
    assert result.text == "Error: boom"


def test_calls_are_independent(dispatcher, opener):
    dispatcher.call_tool("perplexity_ask", {"messages": MESSAGES, "temperature": 0.9})
    dispatcher.call_tool("perplexity_ask", {"messages": MESSAGES})

    assert opener.last_body["temperature"] == 0.2


def test_custom_catalog(client):
    from perplexity_core.catalog import ASK_TOOL

    dispatcher = ToolDispatcher(client, catalog={"perplexity_ask": ASK_TOOL})
    assert dispatcher.call_tool("perplexity_reason", {"messages": MESSAGES}).text == (
        "Unknown tool: perplexity_reason"
    )
