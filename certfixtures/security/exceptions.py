"""
Errors raised while generating certificate material.
"""


class CryptoOperationFailed(Exception):
    """The cryptographic engine could not complete an operation.

    The engine's own exception is kept as ``__cause__``.
    """

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation
