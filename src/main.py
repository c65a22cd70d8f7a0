"""Entry point for the Type Shuffle demo page.

Sets up ECS world, event bus, systems, and Arcade window.
"""
from typeshuffle.app import main

if __name__ == "__main__":
    main()
