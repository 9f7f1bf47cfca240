"""
Engine configuration.
"""
from typing import Dict, Optional


class EngineConfig:
    """Configuration for a game session."""

    def __init__(self,
                 # Pause before the computer answers, in seconds
                 think_delay: float = 0.5,

                 # Chance that the Easy tier looks for a win or block
                 easy_assist_probability: float = 0.2,

                 # Seed for the opponent's random source
                 seed: Optional[int] = None):

        if think_delay < 0:
            raise ValueError(f"think_delay must be >= 0, got {think_delay}")
        if not 0.0 <= easy_assist_probability <= 1.0:
            raise ValueError(
                f"easy_assist_probability must be in [0, 1], got {easy_assist_probability}")

        self.think_delay = think_delay
        self.easy_assist_probability = easy_assist_probability
        self.seed = seed

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {k: v for k, v in self.__dict__.items()}

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'EngineConfig':
        """Create config from dictionary."""
        return cls(**config_dict)
