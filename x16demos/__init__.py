"""Small console demo programs: greetings, screen colours, a menu and a guessing game."""

__version__ = "0.1.0"
__all__ = ["basics", "screen", "menu", "numberguess"]