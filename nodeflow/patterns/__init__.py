"""Reusable orchestration patterns built on nodes."""

from .agent import Agent
from .mapreduce import MapReduce
from .multi_agent import MultiAgent
from .rag import Rag
from .workflow import CANCEL, DEFAULT, Workflow

__all__ = [
    "Agent",
    "CANCEL",
    "DEFAULT",
    "MapReduce",
    "MultiAgent",
    "Rag",
    "Workflow",
]
