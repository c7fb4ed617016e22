from unittest.mock import patch
import pytest

from src.service import LLMClient, Message


class TestLLMClientInitialization:
    """Test cases for LLM client initialization."""

    def test_init_with_model_only(self):
        """Defaults apply when only a model is given."""
        client = LLMClient(model="gpt-4o-mini")
        assert client.temperature == 1.0
        assert client.max_tokens is None
        assert client.messages == []
        assert client.additional_params == {}

    def test_init_with_additional_params(self):
        """Unknown keyword arguments are kept for the provider."""
        client = LLMClient(model="gpt-4o-mini", top_p=0.9, api_base="http://localhost:4000")
        assert client.additional_params == {"top_p": 0.9, "api_base": "http://localhost:4000"}


class TestMessages:
    """Test cases for message history."""

    def test_add_and_clear(self):
        """Messages accumulate and can be cleared."""
        client = LLMClient(model="gpt-4o-mini")
        client.add_message("system", "Be brief.")
        client.add_message("user", "Hi")
        assert [m["role"] for m in client.messages] == ["system", "user"]

        client.clear_messages()
        assert client.messages == []

    def test_get_messages_returns_copy(self):
        """Changing the returned list does not touch the client."""
        client = LLMClient(model="gpt-4o-mini")
        client.add_message("user", "Hello!")
        client.get_messages().append({"role": "user", "content": "extra"})
        assert len(client.messages) == 1

    def test_invalid_role(self):
        """Roles are validated."""
        with pytest.raises(Exception):
            Message(role="robot", content="Test")


class TestCompletion:
    """Test cases for completion calls."""

    @patch('litellm.completion')
    def test_completion_params(self, mock_completion, make_response):
        """Model settings and extra params are forwarded."""
        mock_completion.return_value = make_response()

        client = LLMClient(model="gpt-4o-mini", temperature=0.3, max_tokens=256, top_p=0.8)
        client.add_message("user", "Hi")
        client.completion(n=1)

        call_kwargs = mock_completion.call_args[1]
        assert call_kwargs["model"] == "gpt-4o-mini"
        assert call_kwargs["messages"] == [{"role": "user", "content": "Hi"}]
        assert call_kwargs["temperature"] == 0.3
        assert call_kwargs["max_tokens"] == 256
        assert call_kwargs["top_p"] == 0.8
        assert call_kwargs["n"] == 1

    @patch('litellm.completion')
    def test_completion_without_max_tokens(self, mock_completion, make_response):
        """max_tokens is omitted when unset."""
        mock_completion.return_value = make_response()

        LLMClient(model="gpt-4o-mini").completion()
        assert "max_tokens" not in mock_completion.call_args[1]


class TestCompleteText:
    """Test cases for single-prompt text completion."""

    @patch('litellm.completion')
    def test_returns_content(self, mock_completion, make_response):
        """The first choice's text is returned."""
        mock_completion.return_value = make_response(content='["a", "b"]')

        client = LLMClient(model="gpt-4o-mini")
        assert client.complete_text("List things") == '["a", "b"]'

        sent = mock_completion.call_args[1]["messages"]
        assert sent == [{"role": "user", "content": "List things"}]

    @patch('litellm.completion')
    def test_calls_are_independent(self, mock_completion, make_response):
        """Each call sends only its own prompt."""
        mock_completion.return_value = make_response()

        client = LLMClient(model="gpt-4o-mini")
        client.complete_text("first")
        client.complete_text("second")

        sent = mock_completion.call_args[1]["messages"]
        assert sent == [{"role": "user", "content": "second"}]
        assert client.messages[-1] == {"role": "assistant", "content": "Test response"}

    @patch('litellm.completion')
    def test_empty_content_raises(self, mock_completion, make_response):
        """A reply without text is an error."""
        mock_completion.return_value = make_response(content=None)

        with pytest.raises(ValueError, match="No content"):
            LLMClient(model="gpt-4o-mini").complete_text("Hi")
