#!/usr/bin/env python3

import logging

import click

from memesites import __version__, error as err
from memesites.alignio import get_reader

logging.basicConfig(
    level='INFO', format='%(asctime)s %(levelname)7s | %(message)s', datefmt='%Y/%m/%d %H:%M:%S')
LOG = logging.getLogger(__name__)

OUTPUT_FORMATS = ('fasta', 'json', 'tsv')


@click.group()
@click.help_option('-h', '--help')
@click.version_option(__version__, '-v', '--version', message='%(prog)s %(version)s')
@click.option('--debug/--no-debug', default=False, envvar='MEMESITES_DEBUG')
@click.option('--quiet', is_flag=True, default=False, help='only log warnings and errors')
def cli(debug, quiet):
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
    elif quiet:
        logging.getLogger().setLevel(logging.WARNING)


def read_blocks(meme_file, motif=None):
    """Returns all the alignments in a MEME report (optionally for a single motif)."""
    try:
        with get_reader('meme', meme_file) as reader:
            blocks = list(reader)
    except err.MemeFormatError as e:
        raise click.ClickException('failed to read MEME report "{}": {}'.format(meme_file, e))

    if motif:
        blocks = [b for b in blocks if b.motif and motif in (b.motif.motif_id, b.motif.alt_id)]
        if not blocks:
            raise click.ClickException('no sites found for motif "{}" in "{}"'.format(motif, meme_file))

    return blocks


@click.command()
@click.option('--in', 'meme_file', type=click.Path(exists=True, file_okay=True, dir_okay=False),
              required=True, help='MEME report (text format)')
@click.option('--format', 'out_format', type=click.Choice(OUTPUT_FORMATS), default='fasta')
@click.option('--motif', type=str, default=None, help='only output sites for this motif (eg "1", "MEME-1")')
def sites(meme_file, out_format, motif):
    '''
    print the motif sites from a MEME report
    '''
    blocks = read_blocks(meme_file, motif)

    LOG.info("Read %s alignments from %s", len(blocks), meme_file)

    for idx, block in enumerate(blocks):
        if out_format == 'fasta':
            click.echo(block.to_fasta(), nl=False)
        elif out_format == 'json':
            click.echo(block.as_json())
        elif out_format == 'tsv':
            click.echo(block.to_tsv(header=(idx == 0)), nl=False)


@click.command()
@click.option('--in', 'meme_file', type=click.Path(exists=True, file_okay=True, dir_okay=False),
              required=True, help='MEME report (text format)')
def summary(meme_file):
    '''
    summarise the sites sections of a MEME report
    '''
    blocks = read_blocks(meme_file)

    for idx, block in enumerate(blocks, 1):
        motif_name = block.motif.name if block.motif else str(idx)
        click.echo("{}\t{}\t{}".format(motif_name, block.count_sites, block.aln_positions))

    LOG.info("DONE")


cli.add_command(sites)
cli.add_command(summary)

if __name__ == '__main__':
    cli()
