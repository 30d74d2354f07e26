"""Todo title generation backed by Amazon Bedrock."""

import logging
from abc import ABC, abstractmethod
from typing import Any

from core.errors import GenerationError

logger = logging.getLogger(__name__)

TODO_PROMPT = (
    "Generate a funny TODO title that i can add to my TODO list! "
    "Keep it short and sweet, a maximum of 10 words. Reply with the title only."
)


class TitleGenerator(ABC):
    @abstractmethod
    def generate_title(self) -> str: ...


class BedrockTitleGenerator(TitleGenerator):
    def __init__(self, client: Any, model_id: str, temperature: float = 0.9):
        self._client = client
        self._model_id = model_id
        self._temperature = temperature

    def generate_title(self) -> str:
        try:
            response = self._client.converse(
                modelId=self._model_id,
                messages=[{"role": "user", "content": [{"text": TODO_PROMPT}]}],
                inferenceConfig={"temperature": self._temperature, "maxTokens": 64},
            )
            content = response["output"]["message"]["content"]
        except Exception as e:
            raise GenerationError(f"Failed to generate todo: {e}") from e

        title = "".join(block.get("text", "") for block in content).strip().strip('"').strip()
        if not title:
            raise GenerationError("Failed to generate todo: model returned an empty title")
        logger.info("Generated todo title with %s", self._model_id)
        return title
