"""LLM integration module for spending insights."""

from llm.factory import get_llm_provider

__all__ = ["get_llm_provider"]
