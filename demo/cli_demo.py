#!/usr/bin/env python3
"""
Interactive CLI demo for Mod Agent Service.

Reads chat lines from the terminal and prints the cards the bot would send.
"""
import logging
import sys

# Imports assume the package is installed (pip install -e .)
from mod_agent import ModAgentApp, load_config_from_env
from mod_agent.exceptions import ModAgentError
from mod_agent.interaction import ConsoleSink

DEMO_CONTEXT_ID = 1


def print_banner(app):
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("  Mod Agent Service - Interactive CLI Demo")
    print("=" * 60)
    print(f"\nCommands: {', '.join(app.service.registry.keywords())}")
    print("Example: linkmod bobs mods")
    print("\nType 'quit' or 'exit' to end the session.")
    print("-" * 60 + "\n")


def main():
    """Main CLI loop."""
    try:
        config = load_config_from_env()
        logging.basicConfig(
            level=getattr(logging, config.log_level, logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[logging.StreamHandler()]
        )
        app = ModAgentApp(config)
        app.initialize()
    except ModAgentError as e:
        print(f"\n❌ Failed to initialize service: {e}")
        return 1

    print_banner(app)
    sink = ConsoleSink()

    while True:
        try:
            text = input("You: ").strip()
        except (KeyboardInterrupt, EOFError):
            print("\n\n👋 Goodbye!\n")
            break

        if not text:
            continue
        if text.lower() in ['quit', 'exit', 'q']:
            print("\n👋 Goodbye!\n")
            break

        outcome = app.handle_message(DEMO_CONTEXT_ID, text, sink, is_admin=True)
        if outcome is None:
            print("\n🤷 Not a command.")

    app.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
