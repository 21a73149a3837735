# Exceptions raised for input that cannot be verified at all.
# Broken routing constraints are never raised; they are reported in VerificationResult.


class VerifierError(Exception):
    pass


class InstanceFormatError(VerifierError, ValueError):
    """Instance file is not a readable EVRPTW instance."""


class SolutionFormatError(VerifierError, ValueError):
    """Solution file has no numeric cost or references unknown nodes."""
