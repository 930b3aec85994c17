from fastapi import HTTPException, status


class BackofficeException(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal server error"

    def __init__(self, detail: str | None = None):
        super().__init__(status_code=self.status_code, detail=detail or self.detail)


class ValidationException(BackofficeException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid request."


class NotFoundException(BackofficeException):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Resource not found."


class HotelNotFoundException(NotFoundException):
    detail = "Hotel not found."


class RoomTypeNotFoundException(NotFoundException):
    detail = "Room type not found."


class InventoryNotFoundException(NotFoundException):
    detail = "Inventory not found."


class ReservationNotFoundException(NotFoundException):
    detail = "Reservation not found."


class ConflictException(BackofficeException):
    status_code = status.HTTP_409_CONFLICT
    detail = "Request conflicts with the current state."


class InventoryAlreadyExistsException(ConflictException):
    detail = "Inventory already exists for this date."


class ReservedExceedsTotalException(ConflictException):
    detail = "Reserved rooms cannot exceed the total number of rooms."


class InsufficientInventoryException(ConflictException):
    detail = "Not enough rooms left for this date."


class StillReferencedException(ConflictException):
    detail = "Resource is still referenced by inventory or reservations."
