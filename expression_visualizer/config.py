"""Configuration for expression processing and stepwise playback."""

from dataclasses import dataclass


@dataclass
class ParserConfig:
    """Controls how forgiving the converter and tree builder are.

    The default reproduces the permissive behaviour: unmatched brackets are
    dropped, unknown characters are treated as operators, and leftover
    operands are ignored in favour of the top of the stack. With
    ``strict=True`` each of those cases raises instead.
    """

    strict: bool = False


@dataclass
class AnimationConfig:
    """Pacing and layout of the stepwise evaluation log."""

    step_delay: float = 0.8  # seconds between delivered events
    indent: str = "  "       # repeated once per depth level

    def __post_init__(self):
        if self.step_delay < 0:
            raise ValueError(f"step_delay must be non-negative, got {self.step_delay}")


DEFAULT_PARSER_CONFIG = ParserConfig()
DEFAULT_ANIMATION_CONFIG = AnimationConfig()

EXAMPLE_EXPRESSIONS = (
    "(3+5)*(2-8)",
    "2^3+5*4",
    "((15/(7-(1+1)))*3)-(2+(1+1))",
    "10+20*30/2",
)
