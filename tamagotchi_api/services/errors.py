"""Errors raised by the pet service and translated to HTTP responses by the routers.

A dead pet is not an error: interactions report it through InteractionResult.
"""


class PetServiceError(Exception):
    pass


class PetNotFoundError(PetServiceError, LookupError):
    def __init__(self, pet_id: int):
        self.pet_id = pet_id
        super().__init__(f"Pet {pet_id} not found")


class PetIdMismatchError(PetServiceError, ValueError):
    def __init__(self, path_id: int, body_id: int):
        self.path_id = path_id
        self.body_id = body_id
        super().__init__(f"Pet id in path ({path_id}) does not match id in body ({body_id})")


class ConcurrencyConflictError(PetServiceError, RuntimeError):
    """The pet was changed by another request between our read and our write."""

    def __init__(self, pet_id: int):
        self.pet_id = pet_id
        super().__init__(f"Pet {pet_id} was modified concurrently")
