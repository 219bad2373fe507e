from dataclasses import dataclass, asdict, fields
from typing import Any, ClassVar, Dict, Tuple


@dataclass
class Record:
    """Base for models that mirror a backend table row"""
    id: str = ""

    TABLE: ClassVar[str] = ""
    # PostgREST column list used by the admin fetch, may embed related rows
    SELECT: ClassVar[str] = "*"
    # display field -> (embedded table, column, default)
    JOINED_FIELDS: ClassVar[Dict[str, Tuple[str, str, Any]]] = {}
    # columns generated by the database, never sent on insert
    SERVER_FIELDS: ClassVar[Tuple[str, ...]] = ("id", "created_at", "updated_at")

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Record':
        """Build a model from a row dictionary, ignoring unknown columns"""
        if isinstance(data, cls):
            return data
        known = set(cls.field_names())
        values = {key: value for key, value in dict(data).items() if key in known}
        if values.get('id') is not None:
            values['id'] = str(values['id'])
        return cls(**values)

    @classmethod
    def from_joined(cls, row: Dict[str, Any]) -> 'Record':
        """Build a model from a row with embedded users/bookings objects"""
        data = dict(row)
        for display_field, (embedded, column, default) in cls.JOINED_FIELDS.items():
            related = data.get(embedded) or {}
            data[display_field] = related.get(column) or default
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_record(self) -> Dict[str, Any]:
        """Columns to send to the backend on insert"""
        display_fields = set(self.JOINED_FIELDS)
        return {
            key: value for key, value in self.to_dict().items()
            if key not in display_fields
            and not (key in self.SERVER_FIELDS and not value)
        }

    def merged(self, updates: Dict[str, Any]) -> 'Record':
        """Return a copy with the given column values applied"""
        return type(self).from_dict({**self.to_dict(), **dict(updates)})


def strip_display_fields(model: type, updates: Dict[str, Any]) -> Dict[str, Any]:
    """Drop display-only keys from an update payload"""
    return {key: value for key, value in updates.items() if key not in model.JOINED_FIELDS}
