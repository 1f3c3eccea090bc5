# Snake Arcade Source Package
"""
Snake Arcade - Grid Snake with a fixed-tick loop and a persisted high score.

Modules:
- core: Abstract interfaces for games and renderers, plus the tick scheduler
- games: Game implementations (Snake)
- audio: Synthesized sound cues
- visualization: Pygame front end (drawing surface, buttons, dialogs, app)
- utils: Configuration, logging, and key-value storage
"""

__version__ = "1.0.0"
