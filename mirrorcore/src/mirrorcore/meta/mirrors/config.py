"""Settings shared by the mirrors."""

from ..classes.constants import ConstantNamespace


class MirrorConstants(ConstantNamespace):
    """Names reserved by mirrorcore.

    LOGGER_NAME: root of the loggers of the library.
    DESIGN_PARAM_TYPES: store key of an explicit list of constructor parameter types. When a
        class holds one, it is returned by ClassMirror.get_design_param_types instead of the
        types read from the constructor signature.
    """

    LOGGER_NAME: str = "mirrorcore"
    DESIGN_PARAM_TYPES: str = "design:paramtypes"
