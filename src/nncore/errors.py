# Typed precondition errors raised by checked mode
class PreconditionError(ValueError):
    """A kernel or sampler was called with arguments violating its contract."""


class ShapeMismatchError(PreconditionError): pass


class EmptyInputError(PreconditionError): pass


class DTypeError(PreconditionError): pass


class AliasingError(PreconditionError): pass


class DistributionError(PreconditionError): pass


class CandidateCountError(PreconditionError): pass


class ThresholdError(PreconditionError): pass
