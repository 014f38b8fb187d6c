"""Error taxonomy for orbit construction and transfer calculation."""


class OrbitsError(Exception):
    """Base class for all errors raised by :mod:`orbits`."""


class InvalidParameter(OrbitsError, ValueError):
    """A mass or radius was not a finite positive number."""


class NullPrimaryBody(OrbitsError, ValueError):
    """An orbit was built without the body it circles."""


class NotConfigured(OrbitsError, RuntimeError):
    """A calculation was requested before its inputs (or results) exist."""


class IncompatibleOrbits(OrbitsError, ValueError):
    """The two orbits share no gravitational primary."""
