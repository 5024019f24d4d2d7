"""Errors raised at the unstructured <-> typed pod conversion boundary."""


class ConversionError(Exception):
    """A pod could not be converted to or from its unstructured form."""

    operation = "convert"

    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"unable to {self.operation} pod: {cause}")


class DecodeError(ConversionError):
    """The input manifest cannot be interpreted as a pod."""

    operation = "decode"


class EncodeError(ConversionError):
    """The typed pod cannot be turned back into an unstructured manifest."""

    operation = "encode"
