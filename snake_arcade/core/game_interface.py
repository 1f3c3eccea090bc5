"""
Abstract game interface for Snake Arcade.

Games implement GameInterface. The interface exposes run control as
plain state transitions so that whatever drives the ticks (a frame loop, a test) stays outside the game.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class GameInterface(ABC):
    """
    Abstract base class for games in Snake Arcade.

    Games handle the core logic, rules, and state management.
    They never draw and never own a timer.
    """

    @abstractmethod
    def reset(self) -> bool:
        """
        Return the game to its not-started state.

        Returns:
            True if the state changed
        """
        pass

    @abstractmethod
    def start(self) -> bool:
        """
        Begin (or begin again) running.

        Returns:
            True if the game is now running and was not before
        """
        pass

    @abstractmethod
    def pause(self) -> bool:
        """
        Pause a running game.

        Returns:
            True if the game was running and is now paused
        """
        pass

    @abstractmethod
    def resume(self) -> bool:
        """
        Resume a paused game.

        Returns:
            True if the game was paused and is now running
        """
        pass

    @abstractmethod
    def step(self) -> Any:
        """
        Advance the game by one tick.

        Returns:
            Game-specific step outcome
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state for rendering.

        Returns:
            Dictionary containing all state needed for rendering
        """
        pass

    def get_score(self) -> int:
        """
        Get the current score.

        Returns:
            Current game score
        """
        return 0
