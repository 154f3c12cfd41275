# sunlight_engine/edit/transform.py
"""
Transform snapshots: a complete, self-contained model pose.

Serialized form matches what the renderer's toArray() produces:

    {"position": [x, y, z], "rotation": [x, y, z, "XYZ"], "scale": [x, y, z]}
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Sequence, Tuple

Vector3 = Tuple[float, float, float]


class RotationOrder(str, Enum):
    """Euler rotation order."""
    XYZ = 'XYZ'
    YXZ = 'YXZ'
    ZXY = 'ZXY'
    ZYX = 'ZYX'
    YZX = 'YZX'
    XZY = 'XZY'


def _vector3(values: Sequence[float], name: str) -> Vector3:
    if len(values) != 3:
        raise ValueError(f"{name} needs 3 components, got {len(values)}")
    return tuple(float(v) for v in values)


@dataclass(frozen=True)
class TransformSnapshot:
    """
    Position, rotation and scale of a model at one point in edit history.

    Parameters:
    -----------
    position : (x, y, z)
    rotation : (x, y, z) Euler angles in radians
    order : RotationOrder
    scale : (x, y, z)
    """
    position: Vector3 = (0.0, 0.0, 0.0)
    rotation: Vector3 = (0.0, 0.0, 0.0)
    order: RotationOrder = RotationOrder.XYZ
    scale: Vector3 = (1.0, 1.0, 1.0)

    def __post_init__(self):
        object.__setattr__(self, 'position', _vector3(self.position, 'position'))
        object.__setattr__(self, 'rotation', _vector3(self.rotation, 'rotation'))
        object.__setattr__(self, 'scale', _vector3(self.scale, 'scale'))
        object.__setattr__(self, 'order', RotationOrder(self.order))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TransformSnapshot":
        """
        Build from the serialized form.

        Raises:
            ValueError: missing keys, wrong lengths or an unknown rotation order
        """
        try:
            rotation = list(data['rotation'])
            if len(rotation) != 4:
                raise ValueError(f"rotation needs [x, y, z, order], got {rotation!r}")
            return cls(
                position=data['position'],
                rotation=rotation[:3],
                order=rotation[3],
                scale=data['scale'],
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed transform snapshot: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return {
            'position': list(self.position),
            'rotation': [*self.rotation, self.order.value],
            'scale': list(self.scale),
        }
