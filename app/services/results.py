"""
Fehler als Rückgabewerte für die Buchungslogik.

Services geben bei erwarteten Fachfehlern (Datum in der Vergangenheit,
Platz belegt, ...) ein ServiceError zurück statt eine Exception zu werfen.
Die Router übersetzen das in HTTP-Antworten.
"""
import enum
from dataclasses import dataclass
from typing import Any, Optional

from fastapi import HTTPException


class ErrorKind(enum.Enum):
    INVALID_RANGE = "INVALID_RANGE"
    PAST_DATE = "PAST_DATE"
    NOT_FOUND = "NOT_FOUND"
    SEAT_TAKEN = "SEAT_TAKEN"
    EMPLOYEE_DOUBLE_BOOKED = "EMPLOYEE_DOUBLE_BOOKED"
    STORE_FAILURE = "STORE_FAILURE"


@dataclass(frozen=True)
class ServiceError:
    kind: ErrorKind
    message: str
    # nur bei EMPLOYEE_DOUBLE_BOOKED gesetzt
    seat_number: Optional[int] = None

    def as_dict(self) -> dict:
        return {"ERROR": self.message, "kind": self.kind.value}


def is_error(value: Any) -> bool:
    return isinstance(value, ServiceError)


def not_found(message: str) -> ServiceError:
    return ServiceError(ErrorKind.NOT_FOUND, message)


INVALID_ID_MESSAGE = "Nicht gefunden oder ungültige ID"


HTTP_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_RANGE: 400,
    ErrorKind.PAST_DATE: 400,
    ErrorKind.SEAT_TAKEN: 409,
    ErrorKind.EMPLOYEE_DOUBLE_BOOKED: 409,
    ErrorKind.STORE_FAILURE: 500,
}


def raise_if_error(result: Any) -> Any:
    """Für die Router: ServiceError -> HTTPException, sonst Ergebnis durchreichen."""
    if is_error(result):
        raise HTTPException(status_code=HTTP_STATUS_BY_KIND[result.kind], detail=result.as_dict())
    return result
