from .native import NativeConfig # noqa
