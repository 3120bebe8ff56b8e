from dataclasses import dataclass

from .geometry import Rectangle


@dataclass(frozen=True)
class Annotation:
    """A labeled rectangle tagged with the compositing layer of its owner."""
    layer: int
    class_name: str
    rect: Rectangle

    def with_rect(self, rect: Rectangle) -> 'Annotation':
        return Annotation(self.layer, self.class_name, rect)

    def to_record(self) -> dict:
        return {
            'layer': self.layer,
            'class': self.class_name,
            'x': self.rect.x,
            'y': self.rect.y,
            'width': self.rect.width,
            'height': self.rect.height,
        }
