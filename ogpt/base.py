"""
Base class for Open Graph value objects.

Properties are stored in declaration order (``FIELDS``) so that serialized
output is stable. Setters never raise: a value rejected by its validator is
logged at DEBUG level and the previous value is kept.
"""
import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple

from ogpt.config import OgptConfig
from ogpt.serializer import to_html

logger = logging.getLogger(__name__)


class OgptError(Exception):
    """Raised for malformed input to loaders and the command line."""
    pass


class PropertyBag:
    """Ordered bag of validated Open Graph properties."""

    PREFIX: str = ""
    NS: str = ""
    FIELDS: Tuple[str, ...] = ()
    LIST_FIELDS: Tuple[str, ...] = ()

    def __init__(self, config: Optional[OgptConfig] = None):
        self.config = config or OgptConfig()
        self._values: Dict[str, Any] = {
            name: [] if name in self.LIST_FIELDS else None
            for name in self.FIELDS
        }

    def _get(self, name: str) -> Any:
        value = self._values[name]
        return list(value) if isinstance(value, list) else value

    def _update(self, name: str, raw: Any, value: Any) -> "PropertyBag":
        """Store ``value`` unless the validator rejected ``raw`` (value is None)."""
        if value is None:
            logger.debug(f"Ignoring invalid {type(self).__name__}.{name}: {raw!r}")
        else:
            self._values[name] = value
        return self

    def _append(self, name: str, raw: Any, value: Any, key: Any = None) -> "PropertyBag":
        """
        Append ``value`` to a list property unless rejected or already present.

        Args:
            name: List field name
            raw: Value as given by the caller (for logging)
            value: Validated entry, or None if rejected
            key: Identity used for deduplication (defaults to the entry itself)
        """
        if value is None:
            logger.debug(f"Ignoring invalid {type(self).__name__}.{name}: {raw!r}")
            return self

        entries: List[Any] = self._values[name]
        identity = value if key is None else key
        if any(self._identity(entry) == identity for entry in entries):
            logger.debug(f"Skipping duplicate {type(self).__name__}.{name}: {raw!r}")
            return self

        entries.append(value)
        return self

    @classmethod
    def from_dict(cls, data: Mapping, config: Optional[OgptConfig] = None) -> "PropertyBag":
        """
        Build an object from a plain mapping of property names to values.

        Scalar properties go through their ``set_<name>`` setter and list
        properties through ``add_<name>``, one call per item. Invalid values
        are dropped like any other setter input.

        Raises:
            OgptError: If ``data`` is not a mapping or names an unknown property
        """
        if not isinstance(data, Mapping):
            raise OgptError(f"{cls.__name__} expects a mapping, got {type(data).__name__}")
        obj = cls(config=config)
        for name, value in data.items():
            obj.apply(name, value)
        return obj

    def apply(self, name: str, value: Any) -> "PropertyBag":
        """Route ``value`` to the setter or adder for property ``name``."""
        if name not in self.FIELDS:
            raise OgptError(f"Unknown property '{name}' for {type(self).__name__}")
        if name in self.LIST_FIELDS:
            items = value if isinstance(value, (list, tuple)) else [value]
            adder = getattr(self, f"add_{name}")
            for item in items:
                if isinstance(item, Mapping):
                    try:
                        adder(**item)
                    except TypeError as e:
                        raise OgptError(f"Invalid {name} entry for {type(self).__name__}: {e}") from e
                else:
                    adder(item)
        else:
            getattr(self, f"set_{name}")(value)
        return self

    @staticmethod
    def _identity(entry: Any) -> Any:
        # Entries with attributes are stored as [value, {...}]
        if isinstance(entry, list) and entry:
            return entry[0]
        return entry

    def to_dict(self) -> Dict[str, Any]:
        """Return the set properties in serialization order."""
        return {
            name: self._get(name)
            for name in self.FIELDS
            if self._values[name] not in (None, [])
        }

    def to_html(self, meta_attribute: Optional[str] = None) -> str:
        """
        Output the object as HTML meta elements, one per line.

        Args:
            meta_attribute: 'property' or 'name' (defaults to the configured value)
        """
        return to_html(self, self.PREFIX, meta_attribute or self.config.meta_attribute)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self.to_dict().items())
        return f"{type(self).__name__}({fields})"
