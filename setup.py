#!/usr/bin/env python

import timeit
from setuptools import setup, Command

class Speed(Command):
    description = "run speed benchmarks"
    user_options = []
    boolean_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        def do(setup_statements, statement):
            # extracted from timeit.py
            t = timeit.Timer(stmt=statement,
                             setup="\n".join(setup_statements))
            # determine number so that 0.2 <= total time < 2.0
            for i in range(1, 10):
                number = 10**i
                x = t.timeit(number)
                if x >= 0.2:
                    break
            return x / number

        def abbrev(t):
            if t > 1.0:
                return "%.3fs" % t
            if t > 1e-3:
                return "%.1fms" % (t*1e3)
            return "%.1fus" % (t*1e6)

        for group in ["RFC5054_1024", "RFC5054_2048"]:
            S1 = ("from srp6a import SRPServer, SRPClient, Params, %s, "
                  "create_verifier" % group)
            S2 = "p = Params(group=%s)" % group
            S3 = "r = create_verifier('alice', 'password', params=p)"
            S4 = "sS = SRPServer('alice', r.salt, r.verifier, params=p)"
            S5 = "sC = SRPClient('alice', 'password', params=p)"
            S6 = "A = sC.start(sS.start())"
            S7 = "sS.finish(A); sC.finish()"

            full = do([S1, S2, S3], ";".join([S4, S5, S6, S7]))
            enroll = do([S1, S2], S3)
            print("%-13s: full=%6s, enroll=%6s"
                  % (group, abbrev(full), abbrev(enroll)))

setup(name="srp6a",
      version="0.1.0",
      description="SRP-6a (RFC 5054) password-authenticated key exchange "
                  "(pure python)",
      package_dir={"": "src"},
      packages=["srp6a", "srp6a.test"],
      license="MIT",
      cmdclass={"speed": Speed},
      python_requires=">=3.8",
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Security :: Cryptography",
          ],
      install_requires=["hkdf"],
      )
