"""
HTTP GET client with structured error results.

Every outcome of a call is returned as a Result: either the body bytes or a
ServiceCallError carrying a message and, when the server answered, the status
code. Nothing raises past fetch() or get(). No retries, no caching.
"""
import logging
import threading
from dataclasses import dataclass
from functools import partial
from http import HTTPStatus
from typing import Callable, Generic, Optional, TypeVar

import requests

from objectlibrary.config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

ACCEPT_HEADERS = {"Accept": "application/json"}

NO_DATA = "No Data"
UNPARSEABLE_RESPONSE = "Could not parse HTTP response"

_STATUS_CLASSES = {
    1: "informational",
    2: "success",
    3: "redirected",
    4: "client error",
    5: "server error",
}


class ServiceCallError(Exception):
    """Failure of a service call with a user-facing message and optional HTTP status code."""
    def __init__(self, message: str, code: Optional[int] = None):
        self.message = message
        self.code = code
        super().__init__(message)

    def __eq__(self, other):
        if not isinstance(other, ServiceCallError):
            return NotImplemented
        return (self.message, self.code) == (other.message, other.code)

    def __hash__(self):
        return hash((self.message, self.code))

    def __repr__(self):
        return f"ServiceCallError(message={self.message!r}, code={self.code!r})"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Two-case outcome: exactly one of data or error is set."""

    data: Optional[T] = None
    error: Optional[ServiceCallError] = None

    @classmethod
    def success(cls, data: T) -> "Result[T]":
        return cls(data=data)

    @classmethod
    def failure(cls, error: ServiceCallError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


ServiceCallResult = Result[bytes]
Completion = Callable[[Result], None]


def reason_phrase(status_code: int) -> str:
    """Lowercase reason for a status code, e.g. 404 -> "not found"."""
    try:
        return HTTPStatus(status_code).phrase.lower()
    except ValueError:
        return _STATUS_CLASSES.get(status_code // 100, "unknown")


def handle_response(response, error: Optional[BaseException] = None) -> ServiceCallResult:
    """
    Map a transport outcome to a Result, checking in order:
    transport error, HTTP-ness of the response, 2xx status, non-empty body.
    """
    if error is not None:
        return Result.failure(ServiceCallError(str(error) or type(error).__name__))

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or isinstance(status_code, bool):
        return Result.failure(ServiceCallError(UNPARSEABLE_RESPONSE))

    if not 200 <= status_code <= 299:
        return Result.failure(ServiceCallError(reason_phrase(status_code), status_code))

    data = getattr(response, "content", None)
    if not data:
        return Result.failure(ServiceCallError(NO_DATA))

    return Result.success(bytes(data))


def fetch(url: str, timeout: float) -> ServiceCallResult:
    """GET url once with a fresh session, closed when the call completes."""
    session = requests.Session()
    try:
        response = session.get(url, headers=ACCEPT_HEADERS, timeout=timeout)
    except requests.exceptions.Timeout as e:
        logger.warning("GET %s timed out after %ss", url, timeout)
        return handle_response(None, e)
    except (requests.RequestException, ValueError) as e:
        logger.warning("GET %s failed: %s", url, e)
        return handle_response(None, e)
    finally:
        session.close()

    logger.debug("GET %s: status=%s", url, getattr(response, "status_code", None))
    return handle_response(response)


def dispatch(work: Callable[[], Result], completion: Completion) -> threading.Thread:
    """Run work on a daemon thread and hand its result to completion, once."""
    def run():
        try:
            result = work()
        except Exception as e:
            logger.exception("Background service call failed: %s", e)
            result = Result.failure(ServiceCallError(str(e) or type(e).__name__))
        completion(result)

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return thread


class ServiceClient:
    """Issues single GET requests. Holds no state beyond its timeout."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout if timeout is not None else get_settings().SERVICE_TIMEOUT

    def fetch(self, url: str) -> ServiceCallResult:
        """Blocking GET. Returns the body bytes or a ServiceCallError."""
        return fetch(url, self.timeout)

    def get(self, url: str, completion: Completion) -> threading.Thread:
        """
        Non-blocking GET. completion(result) is called exactly once, on a
        background thread. The returned thread may be joined but not cancelled;
        the request does not keep the client alive.
        """
        return dispatch(partial(fetch, url, self.timeout), completion)
