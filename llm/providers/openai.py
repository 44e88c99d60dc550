"""OpenAI provider implementation using structured outputs."""

from typing import Optional
from pydantic import BaseModel, Field
from openai import OpenAI
from llm.providers.base import LLMProvider
from llm.prompts.loader import PromptManager
from logger import get_logger

logger = get_logger()

PROMPT_NAME = "spending_insights"


class SpendingInsightsInput(BaseModel):
    """Spending summary sent to the model."""

    spendingData: str = Field(
        description="User spending data with categories, amounts and currency codes."
    )


class SpendingInsightsOutput(BaseModel):
    """Structured response expected back from the model."""

    savingsTips: str = Field(
        description="Personalized tips on how to save money, without currency symbols."
    )


class OpenAIProvider(LLMProvider):
    """OpenAI implementation using structured outputs for reliable JSON parsing."""

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        client: Optional[OpenAI] = None,
        prompt_manager: Optional[PromptManager] = None,
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key.
            model: Model to use (e.g., "gpt-4o-mini"). If None, uses prompt default.
            client: Pre-built client, mainly for tests.
            prompt_manager: Prompt manager, mainly for tests.
        """
        self.client = client or OpenAI(api_key=api_key)
        self.model = model
        self.prompt_manager = prompt_manager or PromptManager()

    def get_savings_tips(self, spending_data: str) -> str:
        """Get savings tips from OpenAI.

        Raises:
            ValueError: If the request or the parsed response is empty.
            Exception: If the OpenAI API call fails.
        """
        request = SpendingInsightsInput(spendingData=spending_data)
        if not request.spendingData.strip():
            raise ValueError("Spending data is empty")

        rendered_prompt = self.prompt_manager.render_prompt(
            PROMPT_NAME, {"spending_data": request.spendingData}
        )

        model = self.model or rendered_prompt["parameters"].get("model", "gpt-4o-mini")
        temperature = rendered_prompt["parameters"].get("temperature", 0.4)
        max_tokens = rendered_prompt["parameters"].get("max_tokens", 1500)

        line_count = len(request.spendingData.splitlines())
        logger.info(
            f"Requesting savings tips for {line_count} expense(s) "
            f"(model: {model}, prompt version: {rendered_prompt['version']})"
        )

        try:
            response = self.client.beta.chat.completions.parse(
                model=model,
                messages=[
                    {"role": "system", "content": rendered_prompt["system_prompt"]},
                    {"role": "user", "content": rendered_prompt["user_prompt"]},
                ],
                temperature=temperature,
                max_tokens=max_tokens,
                response_format=SpendingInsightsOutput,
            )
        except Exception as e:
            logger.error(f"OpenAI API error: {e}")
            raise

        result = response.choices[0].message.parsed
        if result is None or not result.savingsTips.strip():
            logger.warning("OpenAI returned no savings tips")
            raise ValueError("OpenAI returned no savings tips")

        return result.savingsTips.strip()
