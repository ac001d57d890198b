"""Entry point kept minimal by delegating to Engine.

The engine opens the window and runs the fixed-rate loop; the game scene it
hosts owns all gameplay. Run from the repository root so the relative asset
and save paths resolve.
"""

from core.engine import Engine


def main():  # small wrapper for clarity / debuggers
    Engine().run()


if __name__ == "__main__":
    main()
