"""
Domain Exceptions

Every failure the account operations can produce has its own exception type.
Each one carries a message that can be shown to the user as-is, so the CLI
can map any of them to a single line of output and return to the menu.
"""


class TourismError(Exception):
    """Base exception for all tourism manager errors."""
    pass


class DuplicateUsernameError(TourismError):
    """Registration attempted with a username that already exists."""
    
    def __init__(self, username: str):
        self.username = username
        super().__init__(
            f"Username '{username}' already exists. Please choose another one."
        )


class UserNotFoundError(TourismError):
    """No account matches the given username."""
    
    def __init__(self, username: str):
        self.username = username
        super().__init__(f"User '{username}' was not found in the system.")


class WrongPasswordError(TourismError):
    """The username matched but the password did not."""
    
    def __init__(self, username: str):
        self.username = username
        super().__init__("Incorrect password provided.")


class AlreadyBookedError(TourismError):
    """The account already holds an active booking."""
    
    def __init__(self, username: str, destination: str):
        self.username = username
        self.destination = destination
        super().__init__(
            f"You already have an active booking for {destination}. "
            "Please cancel your previous ticket before booking a new one!"
        )


class InvalidPackageCodeError(TourismError):
    """Package code outside the catalog range."""
    
    def __init__(self, code: int):
        self.code = code
        super().__init__(f"Invalid tour code number entered: {code}")


class ZeroTicketsError(TourismError):
    """Booking requested with no tickets."""
    
    def __init__(self, ticket_count: int):
        self.ticket_count = ticket_count
        super().__init__("At least one ticket is required to make a booking.")


class NoActiveBookingError(TourismError):
    """Cancel or check requested while no booking is active."""
    
    def __init__(self, username: str):
        self.username = username
        super().__init__("No tour has been booked yet.")


class NotLoggedInError(TourismError):
    """An operation that needs a logged-in user was called anonymously."""
    
    def __init__(self, message: str = "No user is currently logged in. Please log in first."):
        super().__init__(message)
