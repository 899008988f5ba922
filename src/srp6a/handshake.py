import logging, os
from collections.abc import Mapping
from . import srp
from .arith import is_zero_mod
from .errors import (SRPError, BadRecordMacError, IllegalParameterError,
                     InsufficientSecurityError,
                     OnlyCallStartOnce, OnlyCallFinishOnce, HandshakeFailed)
from .finalize import session_key, SESSION_KEY_INFO
from .params import DefaultParams
from .srp import ServerChallenge
from .util import random_bits

logger = logging.getLogger(__name__)

# Handshake states. A handshake only moves forward; a new login attempt
# needs a new object (and therefore fresh a or b).
NEW = "new"
AWAITING_CLIENT_PUBLIC_VALUE = "awaiting-client-public-value"
SENT_CLIENT_PUBLIC_VALUE = "sent-client-public-value"
COMPUTED_PREMASTER = "computed-premaster"
DONE = "done"
FAILED = "failed"

class _Handshake:
    "This class manages one side of a single SRP-6a key exchange."

    def __init__(self, params=DefaultParams, entropy_f=os.urandom):
        self.params = params
        self.entropy_f = entropy_f
        self.state = NEW
        self._premaster = None

    def _require(self, state):
        if self.state == FAILED:
            raise HandshakeFailed("this handshake has already failed")
        if self.state != state:
            raise HandshakeFailed("expected state %s, but in %s"
                                  % (state, self.state))

    def _check_startable(self):
        if self.state == FAILED:
            raise HandshakeFailed("this handshake has already failed")
        if self.state != NEW:
            raise OnlyCallStartOnce("start() can only be called once")

    def _fail(self, err):
        logger.warning("%s handshake aborted in state %s: %s",
                       self.side, self.state, err)
        self.state = FAILED
        self._forget()

    def _advance(self, state):
        logger.debug("%s handshake: %s -> %s", self.side, self.state, state)
        self.state = state

    def _new_private_value(self):
        return random_bits(self.params.private_value_bits, self.entropy_f)

    def session_key(self, info=SESSION_KEY_INFO, length=None):
        """Derive key material from the premaster secret. May be called
        once; the premaster secret is forgotten afterwards."""
        self._require(COMPUTED_PREMASTER)
        key = session_key(self._premaster, self.N, self.algorithm,
                          info=info, length=length)
        self._advance(DONE)
        self._forget()
        return key


class SRPServer(_Handshake):
    side = "server"

    def __init__(self, identity, salt, verifier, params=DefaultParams,
                 algorithm=None, entropy_f=os.urandom, decoy=False):
        _Handshake.__init__(self, params=params, entropy_f=entropy_f)
        self.identity = identity
        self.salt = salt
        self.verifier = verifier
        self.algorithm = params.check_algorithm(algorithm or params.algorithm)
        self.N = params.group.N
        self.g = params.group.g
        self.decoy = decoy
        self._b = None
        self.B = None

    @classmethod
    def for_unknown_identity(klass, identity, server_secret,
                             params=DefaultParams, algorithm=None,
                             entropy_f=os.urandom):
        """Build a handshake for an identity with no stored verifier. It
        behaves like a real one, but can never produce a session key."""
        algorithm = params.check_algorithm(algorithm or params.algorithm)
        group = params.group
        s, v = srp.fake_verifier(identity, server_secret,
                                 group.N, group.g, algorithm)
        return klass(identity, s, v, params=params, algorithm=algorithm,
                     entropy_f=entropy_f, decoy=True)

    def start(self):
        self._check_startable()
        self._b = self._new_private_value()
        try:
            self.B = srp.server_public_value(self._b, self.verifier,
                                             self.N, self.g, self.algorithm)
        except SRPError as e:
            self._fail(e)
            raise
        self._advance(AWAITING_CLIENT_PUBLIC_VALUE)
        return ServerChallenge(self.N, self.g, self.salt, self.B,
                               self.algorithm)

    def finish(self, client_key_message):
        if self.state in (COMPUTED_PREMASTER, DONE):
            raise OnlyCallFinishOnce("finish() can only be called once")
        self._require(AWAITING_CLIENT_PUBLIC_VALUE)
        try:
            S = srp.server_premaster_secret(self._b, self.N, self.g,
                                            self.verifier, client_key_message,
                                            self.algorithm)
        except SRPError as e:
            self._fail(e)
            raise
        self._b = None
        self._premaster = S
        self._advance(COMPUTED_PREMASTER)
        return S

    def session_key(self, info=SESSION_KEY_INFO, length=None):
        if self.decoy and self.state == COMPUTED_PREMASTER:
            err = BadRecordMacError()
            self._fail(err)
            raise err
        return _Handshake.session_key(self, info=info, length=length)

    def _forget(self):
        self._b = None
        self._premaster = None


class SRPClient(_Handshake):
    side = "client"

    def __init__(self, identity, password, params=DefaultParams,
                 entropy_f=os.urandom):
        _Handshake.__init__(self, params=params, entropy_f=entropy_f)
        self.identity = identity
        self._password = password
        self._a = None
        self.A = None
        self.challenge = None

    def start(self, challenge):
        """Check the server's challenge and return our public value A."""
        self._check_startable()
        try:
            if isinstance(challenge, Mapping):
                challenge = ServerChallenge.from_dict(challenge)
            group = self.params.find_trusted_group(challenge.N, challenge.g)
            if group is None:
                raise InsufficientSecurityError("server offered an "
                                                "untrusted group")
            self.params.check_algorithm(challenge.algorithm)
            if is_zero_mod(challenge.B, challenge.N):
                raise IllegalParameterError("server public value is "
                                            "0 mod N")
            self._a = self._new_private_value()
            self.A = srp.client_public_value(self._a, challenge.N, challenge.g)
        except SRPError as e:
            self._fail(e)
            raise
        self.challenge = challenge
        self.N = challenge.N
        self.algorithm = challenge.algorithm
        self._advance(SENT_CLIENT_PUBLIC_VALUE)
        return self.A

    def finish(self):
        if self.state in (COMPUTED_PREMASTER, DONE):
            raise OnlyCallFinishOnce("finish() can only be called once")
        self._require(SENT_CLIENT_PUBLIC_VALUE)
        try:
            S = srp.client_premaster_secret(self._a, self.identity,
                                            self._password, self.challenge,
                                            self.algorithm)
        except SRPError as e:
            self._fail(e)
            raise
        self._a = None
        self._password = None
        self._premaster = S
        self._advance(COMPUTED_PREMASTER)
        return S

    def _forget(self):
        self._a = None
        self._password = None
        self._premaster = None
