"""Interactive land-title workflow.

Three steps run in order. After each one the user approves, requests a
revision, restarts the step, or cancels:

    title_search -> title_issuance -> legal_review

Revision and restart are self-edges, so the same step runs again with the
current store.

Run with: python examples/workflow_example.py
"""

import asyncio

from nodeflow import CANCEL, DEFAULT, Workflow
from nodeflow.llm import OpenAI, llm_node

APPLICANT = "John Doe"
PROPERTY = "Plot 40, Maple Estate, Springfield"

CHOICES = {
    "a": DEFAULT,
    "approve": DEFAULT,
    "r": "revise",
    "request revision": "revise",
    "d": "restart",
    "deny": "restart",
    "restart": "restart",
    "c": CANCEL,
    "cancel": CANCEL,
}


def build_workflow(provider: OpenAI) -> Workflow:
    wf = Workflow(name="land_title")
    wf.add_step(
        "title_search",
        llm_node(
            provider,
            "You are a land registry search officer. Perform a title search for the "
            "following property: '{property}'. List any encumbrances, prior owners, "
            "and confirm if the title is clear for transfer.",
            output_key="title_search",
        ),
    )
    wf.add_step(
        "title_issuance",
        llm_node(
            provider,
            "You are a land registry officer. Based on the following title search "
            "result:\n{title_search}\n\nPrepare a draft land title issuance for "
            "applicant '{applicant}', property '{property}'.",
            output_key="title_issuance",
        ),
    )
    wf.add_step(
        "legal_review",
        llm_node(
            provider,
            "You are a legal officer. Review the following draft land title issuance "
            "for legal sufficiency, compliance, and clarity.\n\n{title_issuance}",
            output_key="legal_review",
        ),
    )
    wf.connect("title_search", "title_issuance")
    wf.connect("title_issuance", "legal_review")
    for step in wf.steps:
        wf.connect(step, step, action="revise")
        wf.connect(step, step, action="restart")
    return wf


async def ask_user(step: str, store) -> str:
    print(f"\n--- Step: {step} ---")
    print(f"Result of last processing:\n{store.get(step, '')}\n")
    print("Options: [a]pprove, [r]equest revision, [d]eny/restart, [c]ancel")
    answer = (await asyncio.to_thread(input, "Your choice: ")).strip().lower()
    if answer not in CHOICES:
        print("Invalid input, assuming approve.")
    return CHOICES.get(answer, DEFAULT)


async def main():
    wf = build_workflow(OpenAI(model="gpt-4.1-mini"))
    print(wf.visualize())

    store = await wf.run(
        "title_search", {"applicant": APPLICANT, "property": PROPERTY}, ask_user
    )

    print("Workflow finished. Final result:")
    for key, value in store.items():
        print(f"{key}: {value}")


if __name__ == "__main__":
    asyncio.run(main())
