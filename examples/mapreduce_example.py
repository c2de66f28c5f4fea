"""Map-reduce summarization example.

Each document is summarized concurrently, then the summaries are joined
in the original document order.

Requires: pip install nodeflow[openai] and OPENAI_API_KEY.
Run with: python examples/mapreduce_example.py
"""

import asyncio

from nodeflow import MapReduce
from nodeflow.llm import OpenAI, llm_node

DOCS = [
    "Rust is a systems programming language.",
    "Async programming enables concurrency.",
    "LLMs are transforming software development.",
]


def join_summaries(stores):
    return {"all_summaries": "\n".join(store["summary"] for store in stores)}


async def main():
    mapper = llm_node(OpenAI(), "Summarize: {doc}", output_key="summary")
    map_reduce = MapReduce(mapper, join_summaries, max_concurrency=4)

    result = await map_reduce.run([{"doc": doc} for doc in DOCS])
    print("All Summaries:\n", result["all_summaries"])


if __name__ == "__main__":
    asyncio.run(main())
