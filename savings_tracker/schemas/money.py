# savings_tracker/schemas/money.py
from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

# Decimal internally, plain JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
