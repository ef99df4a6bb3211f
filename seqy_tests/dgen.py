'''
schema-driven fake records for the test suites.

a schema is a dict of field -> spec, where a spec is a faker provider name,
a (provider, kwargs) tuple, a {'_qen_provider': ...} dict, a nested schema,
or any literal value.
'''

import numpy as np
from faker import Faker
from seqy import Sequence, from_iterable, repeat_forever
from typing import Any, Dict, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)
        self._issued = 0

    def _call_faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, record: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            # numpy hands back numpy scalars; tests compare against plain python values
            picked = self._rng.choice(config["from"])
            return picked.item() if hasattr(picked, 'item') else picked
        if provider == "ref":
            if config["key"] not in record:
                raise ValueError(f"reference to '{config['key']}' not found in current record.")
            return record[config["key"]]
        if provider == "sequence":
            start = config.get("start", 0)
            return start + self._issued
        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, record: Optional[Dict] = None) -> Any:
        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, record or {})
            # fields may refer to the ones generated before them
            built = {}
            for key, spec in schema.items():
                built[key] = self.create(spec, built)
            return built

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_faker(schema[0], schema[1])

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._call_faker(schema)

        return schema

    def record(self, schema: Any) -> Any:
        result = self.create(schema)
        self._issued += 1
        return result


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Sequence:
        """a fixed batch of records; replays the same records on every drain"""
        records = [self._generator.record(self._schema) for _ in range(count)]
        return from_iterable(records)

    def stream(self) -> Sequence:
        """an endless sequence producing fresh records on every pull"""
        return repeat_forever(lambda: self._generator.record(self._schema))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
