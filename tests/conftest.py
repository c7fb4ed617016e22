from unittest.mock import Mock

import pytest


def create_mock_response(content="Test response", model="gpt-4o-mini") -> Mock:
    """Mock shaped like litellm's ModelResponse (choices[0].message.content, usage)."""
    return Mock(
        id='chatcmpl-test123',
        model=model,
        object='chat.completion',
        choices=[
            Mock(
                finish_reason='stop',
                index=0,
                message=Mock(content=content, role='assistant'),
            )
        ],
        usage=Mock(completion_tokens=10, prompt_tokens=5, total_tokens=15),
    )


@pytest.fixture
def make_response():
    return create_mock_response
