"""Retrieval-augmented generation example.

Run with: python examples/rag_example.py
"""

import asyncio

from nodeflow import Rag
from nodeflow.llm import OpenAI, llm_node


async def main():
    retriever = llm_node(
        OpenAI(model="gpt-4.1-mini"),
        "You are a search assistant. Given the user query: '{query}', retrieve or "
        "synthesize a concise context that would help answer the question.",
        output_key="context",
    )
    generator = llm_node(
        OpenAI(model="gpt-3.5-turbo"),
        "You are an expert assistant. Given the user query: '{query}', and the "
        "following context:\n{context}\n\nGenerate a clear, concise, and accurate "
        "answer for the user.",
        output_key="response",
    )

    rag = Rag(retriever, generator)
    result = await rag.call(
        {"query": "What are the main features of Rust for web development?"}
    )
    print("User Query:", result["query"])
    print("[Final Retrieved Context]\n", result["context"])
    print("[Final Generated Answer]\n", result["response"])


if __name__ == "__main__":
    asyncio.run(main())
