"""Translation layer - LLM-based translation."""
from .llm_translator import LLMTranslator, clean_reply

__all__ = ["LLMTranslator", "clean_reply"]
