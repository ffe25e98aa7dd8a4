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
from seqy import Seq
from typing import Any, Dict, Iterator, Optional


class Generator:
    """
    builds one value from a schema:
      - a dict is a record, each field built in turn
      - {"_qen_provider": "choice", "from": [...]} picks one option
      - a one-element list is a list of that item; "_qen_count" (n or (low, high))
        sets the length and "_qen_items" holds the item schema
      - a string naming a faker provider calls it, any other string is a literal
      - ("provider", {kwargs}) calls a faker provider with arguments
    """

    default_count = 5

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._choice(schema)
            return {field: self.create(spec) for field, spec in schema.items()}

        if isinstance(schema, list):
            if not schema:
                return []
            item = schema[0]
            count = self._count(item)
            if isinstance(item, dict):
                item = item.get("_qen_items", item)
            return [self.create(item) for _ in range(count)]

        if isinstance(schema, str):
            return self._fake_value(schema) if hasattr(self._fake, schema) else schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._fake_value(*schema)

        return schema

    def _fake_value(self, provider: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, provider)
        except AttributeError:
            raise ValueError(f"faker has no provider '{provider}'")
        return method(**(kwargs or {}))

    def _choice(self, config: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider != "choice":
            raise ValueError(f"unknown _qen_provider: '{provider}'")
        picked = self._rng.choice(config["from"])
        # numpy scalars back to plain python values
        return picked.item() if hasattr(picked, "item") else picked

    def _count(self, item: Any) -> int:
        spec = item.get("_qen_count", self.default_count) if isinstance(item, dict) else self.default_count
        if isinstance(spec, (list, tuple)):
            low, high = spec
            return int(self._rng.integers(low, high, endpoint=True))
        return spec


class SchemaRecords:
    """
    an endless iterable of records built from a schema.
    every traversal starts a new generator from the seed, so a seeded stream
    yields the same records each time it is walked.
    """

    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._seed = seed
        self.created = 0  # records built so far, across all traversals

    def __iter__(self) -> Iterator[Any]:
        generator = Generator(self._seed)
        while True:
            record = generator.create(self._schema)
            self.created += 1
            yield record


def from_schema(schema: Any, seed: Optional[int] = None) -> Seq:
    """a lazy, infinite Seq of generated records. bound it with take()"""
    return Seq(SchemaRecords(schema, seed))
