"""
memesites.alignio - reading alignments from motif discovery reports
"""

# core
import abc
import io
import logging
import os
import re

# local
from memesites import error as err
from memesites.align import AlignedSite, AlignmentBlock, MotifInfo
from memesites.error import ParseError
from memesites.version import MemeVersion

LOG = logging.getLogger(__name__)


class LineSource(object):
    """
    Supplies lines (without line terminators) from an io or iterable of strings.

    The wrapped stream is owned by the caller and is never closed here.
    """

    def __init__(self, lines):
        self._iter = iter(lines)
        self._exhausted = False
        self.line_number = 0

    def read_line(self):
        """Returns the next line, or None at the end of the stream."""
        if self._exhausted:
            return None
        try:
            line = next(self._iter)
        except StopIteration:
            self._exhausted = True
            return None
        self.line_number += 1
        return line.rstrip('\r\n')


class AlignIOFormat(abc.ABC):
    """Capabilities shared by the alignment format handlers."""

    format_name = None

    @abc.abstractmethod
    def next_block(self):
        """Returns the next AlignmentBlock in the stream (or None at the end)."""

    @abc.abstractmethod
    def write_block(self, block):
        """Writes an AlignmentBlock in this format."""

    def __iter__(self):
        while True:
            block = self.next_block()
            if block is None:
                return
            yield block


class ParserState(object):
    """
    Mutable state of one MemeReader.

    `format_version` holds the version of the most recent 'MEME version' line,
    so concatenated reports are each read with their own version.
    """

    def __init__(self):
        self.format_version = None
        self.header_seen = False
        self.in_section = False
        self.motif = None

    def __repr__(self):
        return "ParserState(version={},header_seen={},in_section={},motif={})".format(
            self.format_version, self.header_seen, self.in_section, self.motif)


class MemeReader(AlignIOFormat):
    """
    Reads the "sites sorted by position" sections of a MEME (text) report.

    Each call to :meth:`next_block` returns an :class:`AlignmentBlock` holding
    one :class:`AlignedSite` per site line, built from the central (motif)
    field of the site and the 'Start' column. Only reports written by MEME 3.0
    or later with the -text option can be read.

    The source can be a filename, an open text io, an iterable of lines or the
    report itself as a string. A string is only read as a report when it
    contains a newline; otherwise it must name an existing file.

    The p-value and flanking sequence columns are matched to check the
    format of each site line, but are not kept: every site is recorded on the
    forward strand.
    """

    format_name = 'meme'

    re_header = re.compile(r'^\s*MEME\s+version\s+(\S+)')
    re_html = re.compile(r'<TITLE>', re.IGNORECASE)
    re_sites_section = re.compile(r'sites sorted by position')
    re_motif = re.compile(
        r'^MOTIF\s*(\S+)(?:\s+(\S+))?\s+width\s*=\s*(\d+)\s+sites\s*=\s*(\d+)'
        r'(?:.*?E-value\s*=\s*(\S+))?')
    re_site = re.compile(
        r'^(\S+)\s+(\d*[1-9]\d*)\s+(\S+)\s+([.ACGTacgt]*)\s+([ACGTacgt]+)(?:\s+([.ACGTacgt]*))?\s*$')
    re_decoration = re.compile(r'^-|Sequence name')
    re_blank = re.compile(r'^\s*$')

    def __init__(self, source):
        self.state = ParserState()
        self._owned_io = None
        self._source = self._get_line_source(source)

    def _get_line_source(self, source):
        if isinstance(source, LineSource):
            return source
        if isinstance(source, str):
            if '\n' in source:
                return LineSource(io.StringIO(source))
            if not os.path.isfile(source):
                raise err.ParamError(
                    "MEME report '{}' is not a file (report text must contain a newline)".format(
                        source))
            LOG.debug("opening MEME report '%s'", source)
            self._owned_io = open(source)
            return LineSource(self._owned_io)
        return LineSource(source)

    @property
    def line_number(self):
        """Returns the number of lines read so far."""
        return self._source.line_number

    @property
    def format_version(self):
        """Returns the MemeVersion declared in the report header (None until read)."""
        return self.state.format_version

    def next_block(self):
        """
        Returns the next alignment in the stream.

        Returns:
            block (AlignmentBlock): sites of the next "sites sorted by position"
                section, or None when the stream ends without another section

        Raises:
            MissingHeaderError: no 'MEME version' line before a sites section
                (or before the end of the stream)
            UnsupportedVersionError: report was written by MEME < 3.0
            HtmlFormatError: report is HTML rather than text
            UnrecognizedLineError: unexpected line inside a sites section
                (the partially read alignment is discarded)
        """
        state = self.state
        block = None
        state.in_section = False

        while True:
            line = self._source.read_line()
            if line is None:
                break

            if not state.in_section:
                if self._parse_outside_section(line):
                    block = AlignmentBlock(meme_version=state.format_version, motif=state.motif)
                    state.motif = None
                    state.in_section = True
                continue

            match = self.re_site.match(line)
            if match:
                block.add_site(self._site_from_match(match))
            elif self.re_decoration.search(line):
                pass
            elif self.re_blank.match(line):
                state.in_section = False
                LOG.debug("finished sites section at line %s (%s sites)",
                          self.line_number, block.count_sites)
                break
            else:
                state.in_section = False
                LOG.warning("Unrecognized format (line %s):\n%s", self.line_number, line)
                raise err.UnrecognizedLineError(line, self.line_number)

        if not state.header_seen:
            raise err.MissingHeaderError()

        if state.in_section:
            LOG.warning("reached end of stream inside a sites section (line %s), "
                        "discarding %s sites", self.line_number, block.count_sites)
            state.in_section = False
            return None

        return block

    def _parse_outside_section(self, line):
        """Checks a line outside a sites section, returns whether a section starts here."""
        state = self.state

        match = self.re_header.match(line)
        if match:
            version_str = match.group(1)
            try:
                version = MemeVersion.from_string(version_str)
            except ParseError:
                raise err.UnsupportedVersionError(version_str)
            if not version.is_supported:
                raise err.UnsupportedVersionError(version_str)
            LOG.debug("found MEME header (version %s) at line %s", version, self.line_number)
            if state.format_version is not None and state.format_version != version:
                LOG.debug("MEME version changed from %s to %s at line %s",
                          state.format_version, version, self.line_number)
            state.format_version = version
            state.header_seen = True

        if self.re_html.search(line):
            raise err.HtmlFormatError(line)

        if self.re_sites_section.search(line):
            if not state.header_seen:
                raise err.MissingHeaderError()
            LOG.debug("found sites section at line %s", self.line_number)
            return True

        match = self.re_motif.match(line)
        if match:
            motif_id, alt_id, width, nsites, evalue = match.groups()
            state.motif = MotifInfo(motif_id, alt_id=alt_id, width=width,
                                    nsites=nsites, evalue=evalue)

        return False

    @staticmethod
    def _site_from_match(match):
        # p-value and flanks (groups 3, 4, 6) are only used to validate the line.
        # With only two nucleotide fields after the p-value, the right flank is
        # taken as missing: "x 5 1e-3 ACG TTTT" gives left ACG, central TTTT.
        seq_name, start_pos, _, _, central, _ = match.groups()
        residues = central.upper()
        start = int(start_pos)
        end = start + len(residues) - 1
        return AlignedSite(seq_name, residues, start, end, strand=AlignedSite.FORWARD_STRAND)

    def write_block(self, block):
        raise err.WriteNotSupportedError(self.format_name)

    def close(self):
        """Closes the report file if it was opened by this reader."""
        if self._owned_io:
            self._owned_io.close()
            self._owned_io = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


FORMATS = {
    MemeReader.format_name: MemeReader,
}


def get_reader(format_name, source):
    """Returns a reader for the given alignment format."""
    try:
        reader_class = FORMATS[format_name.lower()]
    except KeyError:
        raise err.ParamError("unknown alignment format '{}' (known formats: {})".format(
            format_name, ", ".join(sorted(FORMATS))))
    return reader_class(source)
