r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
record generator for underfold test fixtures.
'''

import numpy as np
from faker import Faker
from typing import Any, Dict, Optional
from underfold import from_iterable, Sequence


class Generator:
    """schema interpreter.

    a schema is a dict of field -> spec where a spec is one of:
      - a faker provider name ('word', 'name', ...)
      - a (provider, kwargs) tuple
      - a dict with a '_gen_provider' key ('choice', 'ref', 'literal')
      - a nested dict schema
      - anything else, used as a literal value
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_gen_provider"]
        if provider == "choice":
            options = config["from"]
            # index into the options so native python values come back, not numpy scalars
            return options[int(self._rng.integers(len(options)))]

        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_gen_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _gen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_gen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # fields are built in order so later fields can ref earlier ones
            generated = {}
            for k, v in schema.items():
                generated[k] = self.create(v, {**current_context, **generated})
            return generated

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Sequence:
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
