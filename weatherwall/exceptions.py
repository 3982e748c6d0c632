"""Domain errors raised by the WeatherWall core and client."""


class WeatherError(Exception):
    """Base exception for all WeatherWall errors."""


class AirportNotFoundError(WeatherError):
    """Raised when an IATA code is not registered."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f'Unknown airport: {code}')


class DuplicateCodeError(WeatherError):
    """Raised when registering an IATA code that already exists."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f'Airport already registered: {code}')


class UnknownKindError(WeatherError):
    """Raised when a reading kind string matches no known kind."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f'Unknown reading kind: {kind!r}')


class InvalidRangeError(WeatherError):
    """Raised when a reading's mean falls outside its kind's accepted range."""

    def __init__(self, kind: str, mean: float):
        self.kind = kind
        self.mean = mean
        super().__init__(f'{kind} mean {mean} outside accepted range')


class CollectorClientError(WeatherError):
    """Raised when the remote WeatherWall API answers with an error."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f'HTTP {status_code}: {message}')
