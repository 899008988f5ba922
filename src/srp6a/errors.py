class SRPError(Exception):
    pass

class _AlertError(SRPError):
    """An error that maps onto a TLS-SRP alert (RFC 5054 section 2.9)."""
    code = None
    alert = None

    def __init__(self, message=None):
        SRPError.__init__(self, message or self.code)

class IllegalParameterError(_AlertError):
    """A public value was congruent to zero modulo N. Continuing would let
    the peer recover the premaster secret trivially."""
    code = "illegal_parameter"
    alert = 47

class InsufficientSecurityError(_AlertError):
    """The client received (N, g) values it does not trust."""
    code = "insufficient_security"
    alert = 71

class BadRecordMacError(_AlertError):
    """Key confirmation failed. Report this to the user as a generic
    "wrong username or password"."""
    code = "bad_record_mac"
    alert = 20

class UnsupportedAlgorithm(SRPError, ValueError):
    code = "unsupported_algorithm"

class OnlyCallStartOnce(SRPError):
    """start() may only be called once. Re-using a handshake instance would
    re-use its private value."""
class OnlyCallFinishOnce(SRPError):
    """finish() may only be called once. Re-using a handshake instance would
    re-use its private value."""
class HandshakeFailed(SRPError):
    """This handshake already failed, or was driven out of order. Start a
    new one with fresh private values."""
class MissingServerSecret(SRPError):
    pass
