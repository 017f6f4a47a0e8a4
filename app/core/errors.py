class ApiError(Exception):
    """Error with a client-safe message, rendered as {"error": message}."""
    status_code = 500
    message = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)

class BadRequest(ApiError):
    status_code = 400
    message = "Bad request"

# Same message whether the user is missing or the password is wrong
class InvalidCredentials(BadRequest):
    message = "Invalid credentials"

class UsernameTaken(BadRequest):
    message = "Username already taken"

class InsufficientFunds(BadRequest):
    message = "Insufficient funds"

class AlreadyOwned(BadRequest):
    message = "Already owned"

class Unauthenticated(ApiError):
    status_code = 401
    message = "Not authenticated"

class Forbidden(ApiError):
    status_code = 403
    message = "Forbidden"

class NotFound(ApiError):
    status_code = 404
    message = "Not found"
