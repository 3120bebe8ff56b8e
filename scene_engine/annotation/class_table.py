import json
from typing import Dict, Iterable, List

from ..errors import ConfigurationError
from ..models.annotation import Annotation
from ..models.classes import FAMILY_CLASSES
from ..models.enums import ClassTablePolicy, UIFamily


class ClassTable:
    """Ordered class names; a name's index is its id in normalized labels."""

    def __init__(self, names: Iterable[str] = ()):
        self._ids: Dict[str, int] = {}
        for name in names:
            self.add(name)

    @classmethod
    def static(cls, family: UIFamily) -> 'ClassTable':
        return cls(FAMILY_CLASSES[family])

    @classmethod
    def first_seen(cls, images: Iterable[Iterable[Annotation]]) -> 'ClassTable':
        """Build from the surviving annotations of every image, taken in image order."""
        table = cls()
        for annotations in images:
            for annotation in annotations:
                table.add(annotation.class_name)
        return table

    @classmethod
    def build(cls, policy: ClassTablePolicy, family: UIFamily,
              images: Iterable[Iterable[Annotation]] = ()) -> 'ClassTable':
        if policy == ClassTablePolicy.STATIC:
            return cls.static(family)
        if policy == ClassTablePolicy.FIRST_SEEN:
            return cls.first_seen(images)
        raise ConfigurationError(f"Unknown class table policy: {policy}")

    def add(self, name: str) -> int:
        if name not in self._ids:
            self._ids[name] = len(self._ids)
        return self._ids[name]

    def id_of(self, name: str) -> int:
        try:
            return self._ids[name]
        except KeyError:
            raise ConfigurationError(f"Class '{name}' is not in the class table") from None

    @property
    def names(self) -> List[str]:
        return list(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, name: str) -> bool:
        return name in self._ids

    def to_json(self) -> str:
        return json.dumps(self.names)
