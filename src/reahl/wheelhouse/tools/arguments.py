from pydantic import BaseModel
from pydantic import Field


class NoArguments(BaseModel):
    pass


class ElementArguments(BaseModel):
    element: str = Field(
        description=(
            'Human-readable element description used to obtain permission '
            'to interact with the element'
        ),
    )
    ref: str = Field(
        description='Exact target element reference from the page snapshot',
    )
