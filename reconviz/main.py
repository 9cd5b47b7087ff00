#!python
import argparse
import json
import logging
import os
import platform
import sys
import time
from typing import Dict, List, Optional

from . import __version__
from . import util as _util
from .constants import GENOME_BUILD
from .file_io import (
    read_annotations,
    read_copy_number,
    read_cytobands,
    read_genes,
    read_regions,
    read_structural_variants,
)
from .illustrate.constants import DEFAULTS, DiagramSettings
from .illustrate.diagram import draw_rearrangement_profile
from .karyotype import check_build, get_cytobands
from .layout import build_profile_layout


class CustomHelpFormatter(argparse.ArgumentDefaultsHelpFormatter):
    """
    subclass the default help formatter to stop default printing for required arguments
    """

    def _get_help_string(self, action):
        if action.required:
            return action.help
        return super(CustomHelpFormatter, self)._get_help_string(action)

    def add_arguments(self, actions):
        # sort the arguments alphanumerically so they print in the help that way
        actions = sorted(actions, key=lambda x: getattr(x, 'option_strings'))
        super(CustomHelpFormatter, self).add_arguments(actions)


def option_assignment(value: str):
    """
    parse a KEY=VALUE option override

    Example:
        >>> option_assignment('max.cn=6')
        ('max_cn', '6')
    """
    if '=' not in value:
        raise argparse.ArgumentTypeError(f'expected KEY=VALUE: {value}')
    key, val = value.split('=', 1)
    key = key.strip()
    if key not in DEFAULTS:
        raise argparse.ArgumentTypeError(f'unrecognized option: {key}')
    return DEFAULTS.resolve(key), val


def create_parser(argv):
    parser = argparse.ArgumentParser(
        formatter_class=CustomHelpFormatter, add_help=False, description='draw a genomic rearrangement profile'
    )
    required = parser.add_argument_group('required arguments')
    optional = parser.add_argument_group('optional arguments')
    optional.add_argument('-h', '--help', action='help', help='show this help message and exit')
    optional.add_argument(
        '-v',
        '--version',
        action='version',
        version='%(prog)s version ' + __version__,
        help='Outputs the version number',
    )
    required.add_argument('-o', '--output', required=True, help='path to the svg file to write')
    regions = parser.add_mutually_exclusive_group(required=True)
    regions.add_argument(
        '-r', '--regions', nargs='+', metavar='CHR:START-END', help='the regions to display, in display order'
    )
    regions.add_argument('--regions_file', help='table of the regions to display (chr, start, end), in display order')
    optional.add_argument('--copy_number', help='table of copy number segments')
    optional.add_argument('--svs', help='table of structural variants (paired or one breakend per row)')
    optional.add_argument(
        '--build',
        default=GENOME_BUILD.GRCH38,
        help='genome build of the inputs, one of: {}'.format(', '.join(GENOME_BUILD.values())),
    )
    optional.add_argument('--cytobands', help='UCSC cytoBand table for the genome build')
    optional.add_argument('--genes', help='table of genes to mark (name, chromosome, start, end)')
    optional.add_argument('--annotations', help='table of values for the annotation panel (chr, pos, y)')
    optional.add_argument('--config', help='JSON file of drawing options')
    optional.add_argument(
        '--set',
        dest='overrides',
        metavar='KEY=VALUE',
        type=option_assignment,
        nargs='+',
        default=[],
        help='override drawing options, applied after the config file',
    )
    optional.add_argument('--legend', help='path to write the json legend to', default=None)
    optional.add_argument('--no_legend', action='store_true', default=False, help='do not draw the legend')
    optional.add_argument('--log', help='redirect stdout to a log file', default=None)
    optional.add_argument(
        '--log_level', help='level of logging to output', choices=['INFO', 'DEBUG'], default='INFO'
    )
    return parser, parser.parse_args(argv)


def load_settings(config_file: Optional[str] = None, overrides: Optional[List] = None) -> DiagramSettings:
    """
    read the drawing options from a JSON file and apply any overrides

    Raises:
        ConfigurationError: an option is unrecognized or invalid
    """
    config: Dict = dict()
    if config_file:
        with open(config_file, 'r') as fh:
            config = json.load(fh)
        config = {DEFAULTS.resolve(k): v for k, v in config.items()}
    for key, value in overrides or []:
        config[key] = value
    return DiagramSettings(**config)


def main(argv: Optional[List[str]] = None):
    """
    sets up the parser and checks the validity of command line args, loads the input tables and writes the
    drawing

    Args:
        argv: List of arguments, defaults to command line arguments
    """
    if argv is None:  # need to do at run time or patching will not behave as expected
        argv = sys.argv[1:]
    start_time = int(time.time())
    parser, args = create_parser(argv)

    log_conf = {
        'format': '{asctime} [{levelname}] {message}',
        'style': '{',
        'level': args.log_level,
    }

    original_logging_handlers = logging.root.handlers[:]
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    if args.log:  # redirect stdout AND stderr to a log file
        log_conf['filename'] = args.log
    logging.basicConfig(**log_conf)

    _util.logger.info(f'reconviz: {__version__}')
    _util.logger.info(f'hostname: {platform.node()}')
    _util.log_arguments(args)

    try:
        settings = load_settings(args.config, args.overrides)
        check_build(args.build)
        regions = read_regions(args.regions if args.regions else args.regions_file)
        cytobands = None
        if args.cytobands:
            cytobands = get_cytobands(args.build, {args.build: read_cytobands(args.cytobands)})

        layout = build_profile_layout(
            regions,
            settings,
            copy_number=read_copy_number(args.copy_number) if args.copy_number else [],
            svs=read_structural_variants(args.svs) if args.svs else [],
            cytobands=cytobands,
            genes=read_genes(args.genes) if args.genes else None,
            annotations=read_annotations(args.annotations) if args.annotations else None,
        )
        canvas, legend = draw_rearrangement_profile(layout, show_legend=not args.no_legend)

        if os.path.dirname(args.output):
            _util.mkdirp(os.path.dirname(args.output))
        _util.logger.info(f'writing: {args.output}')
        canvas.saveas(args.output)
        if args.legend:
            _util.logger.info(f'writing: {args.legend}')
            with open(args.legend, 'w') as fh:
                json.dump(legend, fh, sort_keys=True, indent='  ')

        duration = int(time.time()) - start_time
        _util.logger.info(f'run time (s): {duration}')
    finally:
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
        for handler in original_logging_handlers:
            logging.root.addHandler(handler)


if __name__ == '__main__':
    main()
