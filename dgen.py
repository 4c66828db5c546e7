'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from typing import Any, Dict, List, Optional


class Generator:
    """
    builds records from a schema for test fixtures.

    a schema value is one of:
      - 'faker_method'                       -> Faker().faker_method()
      - ('faker_method', {kwargs})           -> Faker().faker_method(**kwargs)
      - {'_qen_provider': 'choice', 'from': [...]}   -> numpy choice
      - {'_qen_provider': 'ref', 'key': 'field'}      -> a field generated earlier
      - {'_qen_provider': 'literal', 'value': x}      -> x
      - a nested dict                         -> a nested record
    anything else is taken literally.
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            return config["from"][int(self._rng.integers(len(config["from"])))]
        if provider == "ref":
            if config["key"] not in context:
                raise ValueError(f"reference to '{config['key']}' not found in current record.")
            return context[config["key"]]
        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]
        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._provider(schema, context)
            record = {}
            for key, sub_schema in schema.items():
                # later fields may refer back to earlier ones
                record[key] = self.create(sub_schema, {**context, **record})
            return record

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._faker(schema[0], schema[1])

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._faker(schema)

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> List[Any]:
        """a fresh list of `count` records"""
        return [self._generator.create(self._schema) for _ in range(count)]


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
