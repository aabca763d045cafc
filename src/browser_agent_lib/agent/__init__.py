"""Agent strategies and the public entry point."""

from .models import AgentRunResult
from .prompt import build_system_prompt, CORRECTIVE_OBSERVATION
from .loop import AgentLoop
from .demo import DemoStrategy
from .runner import BrowserAgent

__all__ = [
    "AgentRunResult",
    "build_system_prompt",
    "CORRECTIVE_OBSERVATION",
    "AgentLoop",
    "DemoStrategy",
    "BrowserAgent",
]
