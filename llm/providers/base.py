"""Base provider interface for LLM implementations."""

from abc import ABC, abstractmethod


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    Each provider can call its service in its own way, as long as it returns
    plain-text savings tips.
    """

    @abstractmethod
    def get_savings_tips(self, spending_data: str) -> str:
        """Ask the LLM for savings tips based on a spending summary.

        Args:
            spending_data: One line per expense, e.g.
                "2024-05-01T12:00:00+00:00: Lunch (Food) - USD 12.50".

        Returns:
            Free-text savings tips.

        Raises:
            Exception: If the LLM call fails or returns no tips.
        """
        pass
