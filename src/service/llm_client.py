from typing import List, Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field
import litellm

from .models import Message, Role


class LLMClient(BaseModel):
    """
    Thin client over LiteLLM for one-shot text generation.

    Holds the model settings and an optional message history; any extra
    keyword arguments given at construction are forwarded to the provider.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='allow')

    model: str
    temperature: float = 1.0
    max_tokens: Optional[int] = None
    messages: List[Dict[str, str]] = Field(default_factory=list)

    @property
    def additional_params(self) -> Dict[str, Any]:
        """Extra parameters passed during initialization."""
        return self.__pydantic_extra__ if self.__pydantic_extra__ else {}

    def add_message(self, role: Role, content: str) -> None:
        """
        Append a message to the history.

        Args:
            role: "system", "user" or "assistant"
            content: The message content
        """
        message = Message(role=role, content=content)
        self.messages.append(message.model_dump())

    def clear_messages(self) -> None:
        self.messages = []

    def get_messages(self) -> List[Dict[str, str]]:
        """Copy of the message history in OpenAI chat format."""
        return self.messages.copy()

    def completion(self, **kwargs: Any) -> Any:
        """
        Run a completion over the current history.

        Args:
            **kwargs: Additional arguments to pass to litellm.completion()

        Returns:
            The completion response from LiteLLM
        """
        params = {
            "model": self.model,
            "messages": self.get_messages(),
            "temperature": self.temperature,
            **self.additional_params,
            **kwargs
        }

        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens

        return litellm.completion(**params)

    def complete_text(self, prompt: str, **kwargs: Any) -> str:
        """
        Send a single user prompt and return the reply text.

        The history is reset first, so each call is independent.

        Raises:
            ValueError: If the response carries no text content
        """
        self.clear_messages()
        self.add_message("user", prompt)
        response = self.completion(**kwargs)

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise ValueError("No content returned from LLM")

        self.add_message("assistant", content)
        return content
