import json
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Callable, Dict, List, Optional


@dataclass(frozen=True)
class EntitySchema:
    """Schema definition for a Stripe entity.

    ``properties`` lists the Stripe fields the entity reads and ``to_row``
    turns the projected object into the keyword arguments of its model.
    """
    properties: List[str]
    to_row: Callable[[Dict[str, Any]], Dict[str, Any]]

    def project(self, entity: Any) -> Dict[str, Any]:
        """Keep only the listed properties that ``entity`` carries."""
        projected = {}
        for key in self.properties:
            try:
                projected[key] = entity[key]
            except KeyError:
                continue
        return projected

    def translate(self, entity: Any) -> Dict[str, Any]:
        """Project ``entity`` and turn it into model fields."""
        return self.to_row(self.project(entity))


def get_field(entity: Any, key: str, default: Any = None) -> Any:
    """Read ``key`` from a Stripe object or plain dict, ``default`` when missing."""
    try:
        value = entity[key]
    except KeyError:
        return default
    return default if value is None else value


def to_plain(value: Any) -> Any:
    """Recursively convert Stripe objects into JSON-serializable builtins."""
    if isinstance(value, Mapping):
        return {str(k): to_plain(v) for k, v in value.items()}
    if hasattr(value, 'to_dict'):
        return to_plain(value.to_dict())
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value


def to_optional_string(value: Any) -> Optional[str]:
    """Stringify a present value, keeping ``None`` as ``None``."""
    if value is None:
        return None
    plain = to_plain(value)
    if isinstance(plain, (dict, list)):
        return json.dumps(plain, sort_keys=True)
    return str(plain)


def epoch_to_datetime(created: int) -> datetime:
    """Convert Stripe's epoch-seconds ``created`` into an aware UTC datetime."""
    return datetime.fromtimestamp(int(created), tz=UTC)
