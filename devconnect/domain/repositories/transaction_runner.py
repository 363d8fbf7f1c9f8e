from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Optional, TypeVar

T = TypeVar("T")


class TransactionRunner(ABC):
    """Runs a multi-aggregate operation, atomically when the store supports it"""
    
    @property
    @abstractmethod
    def is_atomic(self) -> bool:
        """True when run() wraps the operation in a real transaction"""
        pass
    
    @abstractmethod
    async def run(self, operation: Callable[[Optional[Any]], Awaitable[T]]) -> T:
        """
        Invoke ``operation(session)``.
        
        ``session`` is a storage session bound to an open transaction when
        ``is_atomic`` is True, otherwise None.
        """
        pass
