from typing import List, Optional

class BrainlyError(Exception):
    status_code = 500
    message = "Something went wrong"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"detail": self.message}

class ValidationError(BrainlyError):
    status_code = 411
    message = "Invalid input"

    def __init__(self, errors: List, message: Optional[str] = None):
        self.errors = errors
        super().__init__(message)

    def to_dict(self) -> dict:
        body = super().to_dict()
        body["errors"] = [e.model_dump() for e in self.errors]
        return body

class DuplicateUserError(BrainlyError):
    status_code = 411
    message = "User already exists"

class InvalidCredentialsError(BrainlyError):
    status_code = 403
    message = "Invalid username or password"

class AuthError(BrainlyError):
    status_code = 403
    message = "You are not logged in"

class NotFoundError(BrainlyError):
    status_code = 404
    message = "Not found"

class StoreError(BrainlyError):
    status_code = 500
