"""
memesites.version - versions of the MEME software that generated a report
"""

# core
import functools
import logging
import re

from memesites.error import ParseError

LOG = logging.getLogger(__name__)


@functools.total_ordering
class MemeVersion(object):
    """Object that represents the version of MEME that wrote a report."""

    MIN_SUPPORTED = (3, 0)

    re_version = re.compile(r'^(\d+)(?:\.(\d+))?(?:\.(\d+))?')

    def __init__(self, *args):
        """Creates a new instance of a MemeVersion object.

        The following are all equivalent:

            mv = MemeVersion('4.11.0')
            mv = MemeVersion('4.11')
            mv = MemeVersion(4, 11, 0)

        """
        if len(args) == 1:
            ver_parts = self._split_string(args[0])
        elif len(args) == 2:
            ver_parts = (args[0], args[1], 0)
        elif len(args) == 3:
            ver_parts = args
        else:
            raise ParseError("expected 1, 2, or 3 args (not {}): {}".format(
                len(args), " ".join([str(a) for a in args])))

        self.major, self.minor, self.trace = [int(p) for p in ver_parts]

    @classmethod
    def from_string(cls, version_str):
        """Create a new MemeVersion object from a string (eg '4.11.2')."""
        return cls(*cls._split_string(version_str))

    @classmethod
    def _split_string(cls, version_str):
        match = cls.re_version.match(str(version_str).strip())
        if not match:
            raise ParseError(
                "failed to parse MEME version '{}': expected '<major>.<minor>'".format(version_str))
        major, minor, trace = match.groups()
        return (major, minor or 0, trace or 0)

    @property
    def is_supported(self):
        """Returns whether reports from this version can be parsed."""
        return (self.major, self.minor) >= self.MIN_SUPPORTED

    def join(self, join_char="."):
        """Returns the version string (with an optional join_char)."""
        return join_char.join([str(self.major), str(self.minor), str(self.trace)])

    def _key(self):
        return (self.major, self.minor, self.trace)

    def __eq__(self, other):
        if not isinstance(other, MemeVersion):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, MemeVersion):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return self.join(".")

    def __repr__(self):
        return "MemeVersion({})".format(self.join("."))
