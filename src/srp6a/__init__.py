from .errors import (SRPError, IllegalParameterError, InsufficientSecurityError,
                     BadRecordMacError, UnsupportedAlgorithm)
from .groups import RFC5054_1024, RFC5054_2048
from .params import Params, DefaultParams
from .handshake import SRPServer, SRPClient
from .srp import ServerChallenge, create_verifier
_hush_pyflakes = [SRPError, IllegalParameterError, InsufficientSecurityError,
                  BadRecordMacError, UnsupportedAlgorithm,
                  RFC5054_1024, RFC5054_2048, Params, DefaultParams,
                  SRPServer, SRPClient, ServerChallenge, create_verifier]
del _hush_pyflakes

__version__ = "0.1.0"
