"""Chat-model providers and node factories."""

from .nodes import llm_node, render_prompt
from .protocols import LLM
from .providers import VLLM, Anthropic, OpenAI

__all__ = [
    "LLM",
    "VLLM",
    "Anthropic",
    "OpenAI",
    "llm_node",
    "render_prompt",
]
