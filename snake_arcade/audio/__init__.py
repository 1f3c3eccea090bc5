from .munch import MunchSound, synthesize_munch

__all__ = ["MunchSound", "synthesize_munch"]
