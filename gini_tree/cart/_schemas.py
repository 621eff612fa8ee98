from __future__ import annotations

import numbers
import operator
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError

from gini_tree.core import settings


class TreeParams(BaseModel):
    """Hyper-parameters of tree induction."""

    model_config = ConfigDict(strict=True, frozen=True)

    max_depth: PositiveInt = Field(
        ..., description="Maximum number of decision nodes on any root-to-leaf path."
    )
    empty_label: Literal[0, 1] = Field(
        ..., description="Label of leaves built from an empty partition."
    )


def _as_int(value: Any) -> Any:
    """Turn numpy and other integral scalars into plain ints; bools stay bools."""
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return operator.index(value)
    return value


def resolve_params(max_depth: int | None, empty_label: int | None) -> TreeParams:
    """Validate the parameters, filling unset ones from the settings.

    Raises:
        ValueError: If a parameter is out of range.
    """
    try:
        return TreeParams(
            max_depth=settings.MAX_DEPTH if max_depth is None else _as_int(max_depth),
            empty_label=(
                settings.EMPTY_LABEL if empty_label is None else _as_int(empty_label)
            ),
        )
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ValueError(f"Invalid tree parameters. {errors}") from e
