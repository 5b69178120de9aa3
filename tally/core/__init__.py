"""tally.core

Core primitives: the counter record, the store that guards it, and the
configuration that shapes the service around it.
"""

from .config import Config, load_config
from .exceptions import ConfigError, CounterNotFoundError, InvalidCounterIdError, TallyError
from .ids import new_counter_id, parse_counter_id
from .models import MAX_COUNTER_VALUE, Counter
from .store import CounterStore

__all__ = [
    "MAX_COUNTER_VALUE",
    "Config",
    "ConfigError",
    "Counter",
    "CounterNotFoundError",
    "CounterStore",
    "InvalidCounterIdError",
    "TallyError",
    "load_config",
    "new_counter_id",
    "parse_counter_id",
]
