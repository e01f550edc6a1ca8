from .app import create_app
from .store import CounterOverflowError, CounterStore

__all__ = ["create_app", "CounterStore", "CounterOverflowError"]
