# errors.py


class SceneError(ValueError):
    """
    Raised while assembling a scene when a precondition of the acceleration
    structures is violated (empty collections, primitives without bounds).
    """
