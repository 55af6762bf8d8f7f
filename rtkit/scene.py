"""Scene description vocabulary: object kinds and the tag hierarchy of scene files.

A scene file is a tree of tags four levels deep: the ``rt`` root, the scene
elements (camera, lights and objects), their properties, and the components
of vector and colour properties.
"""

from __future__ import annotations

from enum import IntEnum

NUM_THREADS = 6
MAX_DEPTH = 6
WIN_WIDTH = 1200
WIN_HEIGHT = 800
MENU_WIDTH = 100
SPLIT_WIN = 200

RAY_T_MIN = 0.001
RAY_T_MAX = 1.0e30
EPSILON = 0.00003

FD_ERROR = "Invalid file descriptor"
LEVEL_ERROR = "Invalid level of the tag"
CLOSE_ERROR = "Unclosed tag"
POSITION_ERROR = "Invalid possition of the tag"
DATA_ERROR = "Invalid possition of the data"
PARSE_ERROR = "Error of parsing"
RENDER_ERROR = "Error rendering"
IMAGE_ERROR = "Image error"


class SceneError(ValueError):
    """Raised for tags or levels that a scene file cannot hold."""


class ObjectType(IntEnum):
    """Kinds of scene object."""

    NONE = 0
    PLANE = 1
    SPHERE = 2
    CYLINDER = 3
    CONE = 4
    LIGHT = 5
    ELLIPSOID = 6
    PARABOLOID = 7
    TRIANGLE = 8
    CUBE = 9
    DISK = 10


class TextureKind(IntEnum):
    """Surface texture patterns."""

    SOLID = 0
    GRADIENT = 1
    CHECKER = 2


class Matter(IntEnum):
    """How a material passes light on."""

    REFLECT = 0
    REFRACT = 1


class LightKind(IntEnum):
    """Kinds of light source."""

    POINT = 0
    DIRECTIONAL = 1


def _split(*parts: str) -> tuple[str, ...]:
    return tuple(tag for tag in "".join(parts).split(";") if tag)


_LEVELS: tuple[tuple[str, ...], ...] = (
    ("rt",),
    _split(
        "scene;camera;plane;sphere;cylinder;cone;",
        "light;paraboloid;ellipsoid;cube;triangle;disk",
    ),
    _split(
        "position;look_at;scale;rotate;color;bound_min;",
        "bound_max;vertex_0;vertex_1;vertex_2;slice;slice_vec;",
        "ambient;fov;radius;angle;focus_dist;aperture;",
        "specular;direction;attenuation;intensity",
        ";diffuse;reflect;refract;blur;image;type",
    ),
    _split("x;y;z;r;g;b"),
)

_VECTOR = _split("x;y;z")
_COLOR = _split("r;g;b")

_VECTOR_TAGS = _split(
    "position;look_at;scale;rotate;bound_min;bound_max;",
    "vertex_0;vertex_1;vertex_2;slice;slice_vec;direction",
)

_CHILDREN: dict[str, tuple[str, ...]] = {
    "rt": _LEVELS[1],
    "scene": _split("ambient;color"),
    "camera": _split("fov;angle;position;look_at;focus_dist;aperture"),
    "sphere": _split(
        "position;radius;rotate;scale;specular;diffuse;",
        "reflect;refract;color;blur;image;slice;slice_vec",
    ),
    "plane": _split(
        "position;rotate;scale;specular;diffuse;",
        "reflect;refract;color;blur;image;slice;slice_vec",
    ),
    "light": _split("position;color;type;direction;attenuation;intensity"),
    "cylinder": _split(
        "position;radius;rotate;scale;specular;diffuse",
        ";reflect;refract;color;blur;image;slice;slice_vec",
    ),
    "cone": _split(
        "position;angle;rotate;scale;specular;diffuse;",
        "reflect;refract;color;blur;image;slice;slice_vec",
    ),
    "paraboloid": _split(
        "position;angle;rotate;scale;specular;diffuse;",
        "reflect;refract;color;blur;image;slice;slice_vec",
    ),
    "ellipsoid": _split(
        "position;radius;angle;rotate;scale;specular;diffuse",
        ";reflect;refract;color;blur;image;slice;slice_vec",
    ),
    "cube": _split(
        "position;bound_min;bound_max;rotate;specular;diffuse",
        ";scale;reflect;refract;color;blur;image;slice;slice_vec",
    ),
    "triangle": _split(
        "position;vertex_0;vertex_1;vertex_2;",
        "rotate;scale;specular;diffuse;reflect;refract;",
        "color;blur;image;slice;slice_vec",
    ),
    "disk": _split(
        "position;radius;rotate;scale;specular;diffuse",
        ";reflect;refract;color;blur;image;slice;slice_vec",
    ),
    "color": _COLOR,
}
_CHILDREN.update({tag: _VECTOR for tag in _VECTOR_TAGS})

_KNOWN = frozenset(tag for level in _LEVELS for tag in level)


def tags_at_level(level: int) -> tuple[str, ...]:
    """Tags that may appear at ``level`` of a scene file, 0 being the root."""
    if isinstance(level, bool) or not isinstance(level, int):
        raise TypeError(f"level must be an int, not {type(level).__name__}")
    if not 0 <= level < len(_LEVELS):
        raise SceneError(f"{LEVEL_ERROR}: {level}")
    return _LEVELS[level]


def allowed_children(tag: str) -> tuple[str, ...]:
    """Tags that may be nested directly inside ``tag``; empty for value tags."""
    if not is_known_tag(tag):
        raise SceneError(f"{PARSE_ERROR}: unknown tag {tag!r}")
    return _CHILDREN.get(tag, ())


def is_known_tag(tag: str) -> bool:
    """True when ``tag`` may appear anywhere in a scene file."""
    return isinstance(tag, str) and tag in _KNOWN