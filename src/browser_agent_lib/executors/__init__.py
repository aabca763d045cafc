"""Tool executors that answer requests emitted by the agent."""

from .simulated import SimulatedPageExecutor, DEMO_PRICE_TEXT, DEMO_TABLE_TEXT

__all__ = ["SimulatedPageExecutor", "DEMO_PRICE_TEXT", "DEMO_TABLE_TEXT"]
