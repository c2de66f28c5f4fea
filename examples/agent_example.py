"""Retrying agents example.

Demonstrates:
- A single Agent retrying a flaky LLM call
- Several agents running concurrently with asyncio.gather

Requires: pip install nodeflow[openai] and OPENAI_API_KEY.
Run with: python examples/agent_example.py
"""

import asyncio
import logging

from nodeflow import Agent
from nodeflow.llm import OpenAI, llm_node


async def single_agent(provider: OpenAI):
    ask = llm_node(provider, "{prompt}")
    agent = Agent(ask, max_attempts=3, retry_delay=1.0)

    result = await agent.decide(
        {"prompt": "Write a concise and summarized ode to AI in Shakespearean style"}
    )
    print("[OpenAI response]:\n", result["response"])


async def concurrent_agents(provider: OpenAI):
    poetry = Agent(llm_node(provider, "{prompt}", name="poetry"), 2, 0.5)
    summarizer = Agent(llm_node(provider, "{prompt}", name="summarization"), 2, 0.5)

    first, second = await asyncio.gather(
        poetry.decide({"prompt": "Write a haiku about async Python."}),
        summarizer.decide({"prompt": "Summarize the benefits of concurrency."}),
    )
    print("Agent 1 (poetry) response:\n", first["response"])
    print("Agent 2 (summarization) response:\n", second["response"])


async def main():
    provider = OpenAI(model="gpt-4.1-mini")
    await single_agent(provider)
    await concurrent_agents(provider)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
