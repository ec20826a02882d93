"""Driver class."""


class Driver:
    """A bus driver."""

    def __init__(self, driver_id: int, name: str):
        self.driver_id = driver_id
        self.name = name
