"""
memesites.align - motif sites and the alignments that group them
"""

# core
import json
import logging

# deps
import jsonpickle

# local
from memesites import error as err

LOG = logging.getLogger(__name__)


class AlignedSite(object):
    """
    Class to represent one site (motif occurrence) in an input sequence.

    Coordinates are 1-based and inclusive, relative to the original input
    sequence, and always describe the residues held by the site.
    """

    FORWARD_STRAND = '+'

    __slots__ = ('_id', '_residues', '_start', '_end', '_strand')

    def __init__(self, identifier: str, residues: str, start: int, end: int, strand=FORWARD_STRAND):
        if not identifier:
            raise err.ParamError('site identifier seems to be empty')
        if not residues:
            raise err.ParamError('site {} has no residues'.format(identifier))

        start = int(start)
        end = int(end)
        if start < 1:
            raise err.ParamError('site {} has start {} (coordinates are 1-based)'.format(
                identifier, start))
        if end - start + 1 != len(residues):
            raise err.ParamError(
                ('site {} spans {}-{} ({} positions) but has {} residues: {}').format(
                    identifier, start, end, end - start + 1, len(residues), residues))

        object.__setattr__(self, '_id', identifier)
        object.__setattr__(self, '_residues', residues)
        object.__setattr__(self, '_start', start)
        object.__setattr__(self, '_end', end)
        object.__setattr__(self, '_strand', strand)

    def __setattr__(self, name, value):
        raise AttributeError("AlignedSite is immutable (cannot set '{}')".format(name))

    @property
    def id(self):
        """Returns the name of the sequence this site was found in"""
        return self._id

    @property
    def residues(self):
        """Returns the residues of the site as an upper case string"""
        return self._residues

    @property
    def seq(self):
        return self._residues

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    @property
    def strand(self):
        return self._strand

    def length(self):
        """Return the number of residues in the site."""
        return len(self._residues)

    @property
    def seg_id(self):
        """Returns the id with the site coordinates (eg 'seq1/10-17')."""
        return '{}/{}-{}'.format(self._id, self._start, self._end)

    def to_fasta(self, wrap_width=80):
        """Return a string for this site in FASTA format."""
        fasta_str = '>' + self.seg_id + '\n'
        if wrap_width:
            for line in AlignedSite._chunker(self._residues, wrap_width):
                fasta_str += line + '\n'
        else:
            fasta_str += self._residues + '\n'
        return fasta_str

    @staticmethod
    def _chunker(text_str, width):
        return (text_str[pos:pos + width] for pos in range(0, len(text_str), width))

    def to_dict(self):
        """Returns the site as a dict."""
        return {'id': self._id, 'residues': self._residues, 'start': self._start,
                'end': self._end, 'strand': self._strand}

    def __getstate__(self):
        return self.to_dict()

    def __setstate__(self, state):
        for key in ('id', 'residues', 'start', 'end', 'strand'):
            object.__setattr__(self, '_' + key, state[key])

    def _key(self):
        return (self._id, self._residues, self._start, self._end, self._strand)

    def __eq__(self, other):
        if not isinstance(other, AlignedSite):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        """Represents this site as a string."""
        return '{:<30} {}'.format(self.seg_id, self._residues)

    def __repr__(self):
        return "site({},{}-{},{},{})".format(
            self._id, self._start, self._end, self._strand, self._residues)


class MotifInfo(object):
    """Summary of a motif as given in the 'MOTIF' line of a MEME report."""

    def __init__(self, motif_id, *, alt_id=None, width=None, nsites=None, evalue=None):
        self.motif_id = motif_id
        self.alt_id = alt_id
        self.width = int(width) if width is not None else None
        self.nsites = int(nsites) if nsites is not None else None
        self.evalue = evalue

    @property
    def name(self):
        """Returns the best available name for the motif (eg 'MEME-1')."""
        return self.alt_id if self.alt_id else self.motif_id

    def __str__(self):
        return "MOTIF {} width={} sites={}".format(self.name, self.width, self.nsites)

    def __repr__(self):
        return "MotifInfo(id={},alt_id={},width={},nsites={},evalue={})".format(
            self.motif_id, self.alt_id, self.width, self.nsites, self.evalue)


class AlignmentBlock(object):
    """Alignment of the sites found for one motif in a MEME report."""

    def __init__(self, sites=None, *, source='meme', meme_version=None, motif=None):
        self.source = source
        self.meme_version = meme_version
        self.motif = motif
        self.sites = []
        for site in sites or []:
            self.add_site(site)

    def add_site(self, site: AlignedSite):
        """Add a site to the end of this alignment."""
        if not isinstance(site, AlignedSite):
            raise err.ParamError('expected AlignedSite, not {}'.format(type(site).__name__))
        self.sites.append(site)
        return site

    @property
    def count_sites(self):
        """Return the number of sites in the alignment."""
        return len(self.sites)

    @property
    def aln_positions(self):
        """Return the number of alignment positions (0 for an empty alignment)."""
        return self.sites[0].length() if self.sites else 0

    def find_sites_by_id(self, seq_id):
        """Return all the sites found in the sequence with the given id."""
        return [site for site in self.sites if site.id == seq_id]

    def get_site_at_offset(self, offset):
        """Returns the site at the given offset (zero-based)."""
        return self.sites[offset]

    def to_fasta(self, wrap_width=80):
        """Returns the alignment as a string (FASTA format)"""
        return ''.join([site.to_fasta(wrap_width=wrap_width) for site in self.sites])

    def to_tsv(self, *, header=True):
        """Returns the sites as tab separated lines"""
        lines = []
        if header:
            lines.append("\t".join(['motif', 'id', 'start', 'end', 'strand', 'residues']))
        motif_name = self.motif.name if self.motif else ''
        for site in self.sites:
            lines.append("\t".join([motif_name, site.id, str(site.start),
                                    str(site.end), site.strand, site.residues]))
        return "".join([l + "\n" for l in lines])

    def as_json(self, *, pp=False):
        """Returns the alignment as JSON formatted string."""

        data = jsonpickle.encode(self.to_dict(), unpicklable=False)
        if pp:
            data = json.dumps(json.loads(data), indent=2, sort_keys=True)

        LOG.debug("Serialized AlignmentBlock as JSON string (length:%s)", len(data))
        return data

    def to_dict(self):
        """Returns the alignment as a dict."""
        return {
            'source': self.source,
            'meme_version': str(self.meme_version) if self.meme_version else None,
            'motif': vars(self.motif) if self.motif else None,
            'sites': [site.to_dict() for site in self.sites],
        }

    def __len__(self):
        return len(self.sites)

    def __iter__(self):
        return iter(self.sites)

    def __str__(self):
        return "\n".join([str(site) for site in self.sites])
