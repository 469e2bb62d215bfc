import copy

from tf_aws_handlers.schema import TYPE_LIST, decode_config


def _blocks_differ(elem_schema, old, new):
    if len(old) != len(new):
        return True
    for old_block, new_block in zip(old, new):
        old_block = old_block or {}
        for key, value in (new_block or {}).items():
            field = elem_schema[key]
            if field.type == TYPE_LIST:
                if _blocks_differ(field.elem, old_block.get(key) or [], value):
                    return True
            elif old_block.get(key, field.zero_value()) != value:
                return True
    return False


class ResourceData:
    """
    State of one resource instance during a single handler call.

    Combines the stored identifier, the prior state written by earlier calls
    and the (decoded) configuration for this call. Handlers read through
    get() and write the authoritative remote values back with set().
    """

    def __init__(self, schema, id='', config=None, state=None):
        """
        Initialize resource data.

        Args:
            schema (dict): Field declarations of the resource
            id (str): Stored identifier, empty if the resource is not tracked
            config (dict, optional): Raw configuration, decoded against the schema
            state (dict, optional): Prior state attributes
        """
        self.schema = schema
        self._id = id or ''
        self._state = copy.deepcopy(state) if state else {}
        self._state.pop('id', None)
        self._config = decode_config(schema, config) if config is not None else None

    @property
    def id(self):
        return self._id

    def set_id(self, id):
        self._id = id or ''

    def get(self, key):
        """
        Get the current value of an attribute.

        Configured values win over prior state. When a configuration is
        given, attributes missing from it fall back to state only if they
        are computed; otherwise they yield the zero value of their type.
        """
        if self._config is not None:
            if key in self._config:
                return copy.deepcopy(self._config[key])
            if not self.schema[key].computed:
                return self.schema[key].zero_value()
        if key in self._state:
            return copy.deepcopy(self._state[key])
        return self.schema[key].zero_value()

    def get_ok(self, key):
        """
        Returns:
            tuple: (value, ok) where ok is False for unset or zero values
        """
        value = self.get(key)
        return value, bool(value)

    def get_change(self, key):
        """
        Returns:
            tuple: (old, new) value of the attribute
        """
        old = copy.deepcopy(self._state.get(key, self.schema[key].zero_value()))
        return old, self.get(key)

    def has_change(self, key):
        """
        Check whether the configured value differs from prior state.

        Inside nested blocks only the configured attributes are compared;
        attributes left unset in configuration keep their computed value.
        """
        old, new = self.get_change(key)
        field = self.schema[key]
        if field.type == TYPE_LIST:
            return _blocks_differ(field.elem, old, new)
        return old != new

    def set(self, key, value):
        if key not in self.schema:
            raise KeyError(f"{key} is not an attribute of this resource")
        self._state[key] = copy.deepcopy(value)
        if self._config is not None:
            self._config[key] = copy.deepcopy(value)

    def to_state(self):
        """
        Returns:
            dict: Stored state including the id, empty if the id was cleared
        """
        if not self._id:
            return {}
        state = {name: self.get(name) for name in self.schema}
        state['id'] = self._id
        return state
