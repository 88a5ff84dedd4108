"""Player identity model."""

from __future__ import annotations

import pydantic


class Player(pydantic.BaseModel):
    """A participant in the game.  The board only needs a name to refer to."""

    name: str = pydantic.Field(min_length=1)
