"""Type annotation helpers for CRC configuration fields."""

from typing import Annotated

from pydantic import Field

# Users annotate fields like:  xorout: U16
U16 = Annotated[int, Field(strict=True, ge=0, le=0xFFFF)]
Flag = Annotated[bool, Field(strict=True)]
