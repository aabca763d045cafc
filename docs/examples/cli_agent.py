import asyncio

from browser_agent_lib import AgentSettings, BrowserAgent
from browser_agent_lib.llm_core import setup_logging


async def main() -> None:
    """
    Main function to run the browser agent from a terminal against the simulated page.
    """
    print("Welcome to the Browser Agent CLI!")

    settings = AgentSettings.from_env()
    agent = BrowserAgent(settings=settings)
    if agent.demo_mode:
        print("OPENAI_API_KEY not set, running in demo mode.")
    else:
        print(f"Using OpenAI model {settings.model}.")

    url = input("Page URL: ").strip() or "unknown"

    print("\nAsk about the page! Type 'exit' or 'quit' to stop.")
    while True:
        user_input = input("\nYou: ").strip()
        if user_input.lower() in ["exit", "quit"]:
            print("Goodbye!")
            break

        if not user_input:
            continue

        print(await agent.run(user_input, url))


if __name__ == "__main__":
    setup_logging()
    asyncio.run(main())
