"""
Router configuration.

A single immutable structure controls the decoration, the output target and
the clearing strategy of a ``Construct``.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .clearing import ClearingStrategy, Exact
from .terminal import ConsoleTerminal, Terminal


class ConstructConfig(BaseModel):
    """
    Configuration for a ``Construct``.

    Frozen after creation; build a new config to change behaviour.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    decoration: Optional[str] = Field(
        default=None, description="Logo line written above every view title"
    )
    terminal: Any = Field(
        default_factory=ConsoleTerminal.stdout,
        description="Output target views are written to",
    )
    clearing_strategy: ClearingStrategy = Field(
        default_factory=Exact,
        discriminator="kind",
        description="How previous output is erased between views",
    )

    @field_validator("terminal")
    @classmethod
    def _check_terminal(cls, value: Any) -> Any:
        if not isinstance(value, Terminal):
            raise ValueError(
                f"{type(value).__name__} does not implement the Terminal protocol"
            )
        return value


def get_default_config() -> ConstructConfig:
    """
    Get a configuration bound to stdout with no logo and exact clearing.
    """
    return ConstructConfig()
