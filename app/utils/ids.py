from typing import Optional, Union
from uuid import UUID


def parse_id(value: Union[UUID, str, None]) -> Optional[UUID]:
    """Gibt None zurück wenn value keine gültige UUID ist."""
    if value is None or isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None
