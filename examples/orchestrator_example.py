"""Orchestrator example: one retried node that chains research, code and review.

Run with: python examples/orchestrator_example.py
"""

import asyncio

from nodeflow import Agent, node
from nodeflow.llm import Anthropic, OpenAI, llm_node

research = llm_node(
    OpenAI(model="gpt-4.1-mini"),
    "You are a research assistant. Research and summarize 5 key facts about "
    "{topic} for a software project. Output as a numbered list.",
    output_key="research_facts",
)
write_code = llm_node(
    Anthropic(),
    "You are a senior TypeScript developer. Write a TypeScript function that "
    "prints one fun fact about {topic}, chosen from the following list:\n"
    "{research_facts}\nOutput only the TypeScript code.",
    output_key="typescript_code",
)
review = llm_node(
    OpenAI(model="gpt-3.5-turbo"),
    "You are a code reviewer. Review the following TypeScript code for correctness "
    "and style. Suggest improvements if needed.\n\n{typescript_code}",
    output_key="review",
)


@node
async def orchestrate(store):
    for phase in (research, write_code, review):
        store = await phase(store)

    store["report"] = "\n\n".join(
        [
            "Orchestrator Report",
            f"Research Facts:\n{store['research_facts']}",
            f"TypeScript Code:\n{store['typescript_code']}",
            f"Review:\n{store['review']}",
            "All phases complete.",
        ]
    )
    return store


async def main():
    agent = Agent(orchestrate, max_attempts=2, retry_delay=2.0)
    result = await agent.decide({"topic": "maple syrup"})
    print(result["report"])


if __name__ == "__main__":
    asyncio.run(main())
