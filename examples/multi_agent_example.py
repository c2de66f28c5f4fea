"""Multi-agent example: three agents build one game in parallel.

Each agent writes its own key into the shared store (typescript, html,
tailwindcss), so their writes never collide.

Requires: pip install nodeflow[openai,anthropic], OPENAI_API_KEY and
ANTHROPIC_API_KEY.
Run with: python examples/multi_agent_example.py
"""

import asyncio

from nodeflow import MultiAgent
from nodeflow.llm import Anthropic, OpenAI, llm_node

PROJECT = (
    "Create a fully-functional Space Invader game using TypeScript, HTML, and "
    "TailwindCSS. The game should be playable in a modern browser."
)


async def main():
    team = MultiAgent()
    team.add_agent(
        llm_node(
            OpenAI(model="gpt-4.1-mini"),
            f"{PROJECT}\n\nYour task: Write the complete TypeScript code for the game "
            "logic, including player movement, shooting, enemy behavior, collision "
            "detection, and game loop. Output only the TypeScript code.",
            output_key="typescript",
        )
    )
    team.add_agent(
        llm_node(
            OpenAI(model="gpt-3.5-turbo"),
            f"{PROJECT}\n\nYour task: Write the complete HTML structure for the game. "
            "Use semantic HTML. Output only the HTML code.",
            output_key="html",
        )
    )
    team.add_agent(
        llm_node(
            Anthropic(),
            f"{PROJECT}\n\nYour task: Write the TailwindCSS classes and any custom "
            "styles needed for the game. Output only the relevant CSS.",
            output_key="tailwindcss",
        )
    )

    result = await team.run({})
    print("=== Space Invader Game Artifacts ===")
    print("--- TypeScript Game Logic ---\n", result["typescript"])
    print("--- HTML Structure ---\n", result["html"])
    print("--- TailwindCSS Styles ---\n", result["tailwindcss"])


if __name__ == "__main__":
    asyncio.run(main())
