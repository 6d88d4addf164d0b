# exceptions.py - error types raised by the client
import json
from typing import Optional

import requests


class DigiTicketsApiError(Exception):
    """Base class for errors raised by the DigiTickets client."""


class ConfigurationError(DigiTicketsApiError):
    pass


class MalformedResponseError(ValueError):
    """
    A response body could not be decoded as JSON.

    Keeps the original response so the raw payload can still be inspected
    (``exc.response.text``). ``code`` is the character offset the decoder
    stopped at.
    """

    def __init__(self, response: requests.Response, message: str, code: int = 0):
        super().__init__(message)
        self.response = response
        self.message = message
        self.code = code

    @classmethod
    def from_decode_error(cls, response: requests.Response, error: json.JSONDecodeError):
        exc = cls(response, error.msg, error.pos)
        exc.__cause__ = error
        return exc

    @classmethod
    def from_parsed(cls, parsed):
        if parsed.ok:
            raise ValueError("cannot build an error from a successfully decoded response")
        return cls.from_decode_error(parsed.response, parsed.error)

    def __str__(self):
        return f"json_decode error: {self.message}"


class MalformedApiResponseException(DigiTicketsApiError, MalformedResponseError):
    """Decode failure raised by DigiTicketsApiClient.parse_response."""

    @property
    def status_code(self) -> Optional[int]:
        return getattr(self.response, "status_code", None)
