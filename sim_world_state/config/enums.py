from enum import Enum, auto


class Backend(Enum):
    """
    Physics backends the simulated scene can run on.
    """

    TWO_D = "2d"
    THREE_D = "3d"


backend_str_to_enum = {b.value: b for b in Backend}


def load_backend(backend_str: str) -> Backend:
    """Converts a backend string (e.g. "2d", "3D") to a Backend enum.

    Performs case-insensitive lookup and raises a ValueError if the
    string does not name a known backend.
    """
    backend = backend_str_to_enum.get(backend_str.strip().lower())
    if backend is None:
        raise ValueError(f"Unknown backend: {backend_str}. Choose from {sorted(backend_str_to_enum)}.")
    return backend


class ObjectKind(Enum):
    """Type filter used when resolving objects in the scene graph."""

    COMPOUND = auto()
