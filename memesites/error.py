"""memesites Exception Classes"""

import enum
import logging

LOG = logging.getLogger(__name__)


class ErrorKind(enum.Enum):
    """Kinds of failure raised while reading a MEME report."""
    MISSING_HEADER = 'missing_header'
    UNSUPPORTED_VERSION = 'unsupported_version'
    HTML_FORMAT = 'html_format'
    UNRECOGNIZED_LINE = 'unrecognized_line'
    WRITE_NOT_SUPPORTED = 'write_not_supported'


class GeneralError(Exception):
    """General Exception class within the memesites package."""
    kind = None


class ParamError(GeneralError):
    """Incorrect parameters."""
    pass


class ParseError(GeneralError):
    """Failed to parse information."""
    pass


class MemeFormatError(ParseError):
    """The MEME report does not have the expected format."""
    pass


class MissingHeaderError(MemeFormatError):
    """Sites section (or end of file) reached before any 'MEME version' header."""
    kind = ErrorKind.MISSING_HEADER

    def __init__(self, message=None):
        if not message:
            message = "MEME output file contains no header line (ex: MEME version 3.0)"
        super().__init__(message)


class UnsupportedVersionError(MemeFormatError):
    """MEME report was generated by a version older than 3.0"""
    kind = ErrorKind.UNSUPPORTED_VERSION

    def __init__(self, version):
        self.version = version
        message = ("MEME output file must be generated by version 3.0 or higher "
                   "(found version '{}')").format(version)
        super().__init__(message)


class HtmlFormatError(MemeFormatError):
    """MEME report is HTML rather than plain text"""
    kind = ErrorKind.HTML_FORMAT

    def __init__(self, line=None):
        self.line = line
        super().__init__("MEME output file must be generated with the -text option")


class UnrecognizedLineError(MemeFormatError):
    """Line inside a sites section does not match any expected pattern"""
    kind = ErrorKind.UNRECOGNIZED_LINE

    def __init__(self, line, line_number=None):
        self.line = line
        self.line_number = line_number
        message = "unrecognized format in sites section (line {}): '{}'".format(
            line_number, line)
        super().__init__(message)


class WriteNotSupportedError(GeneralError, NotImplementedError):
    """Writing alignments in this format is not supported"""
    kind = ErrorKind.WRITE_NOT_SUPPORTED

    def __init__(self, format_name):
        self.format_name = format_name
        super().__init__("writing '{}' alignments is not implemented".format(format_name))
