"""Storage interface shared by file-backed and in-memory stores."""

from typing import Optional, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


@runtime_checkable
class StoreProtocol(Protocol[T]):
    """Save/read/remove/list records of one type, keyed by caller-supplied string ids."""

    def save(self, record: T, id: str) -> bool: ...

    def read(self, id: str) -> Optional[T]: ...

    def remove(self, id: str) -> bool: ...

    def list(self) -> list[str]: ...
