"""Errors raised by the profile service."""


class ProfileNotFoundError(LookupError):
    """Raised when a profile has no record and creation was not requested."""

    def __init__(self, player_id: int):
        self.player_id = player_id
        super().__init__(f"Player {player_id} not found.")
