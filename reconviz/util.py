import logging
import os

logger = logging.getLogger('reconviz')


def cast_null(input_value):
    value = str(input_value).lower()
    if value in ['none', 'null']:
        return None
    raise TypeError('casting to null/None failed', input_value)


def cast_boolean(input_value):
    value = str(input_value).lower()
    if value in ['t', 'true', '1', 'y', 'yes']:
        return True
    elif value in ['f', 'false', '0', 'n', 'no']:
        return False
    raise TypeError('casting to boolean failed', input_value)


def format_position(chr: str, pos: int) -> str:
    """
    human readable breakend position

    Example:
        >>> format_position('chr2', 10000000)
        'chr2:10,000,000'
    """
    return f'{chr}:{int(pos):,}'


def log_arguments(args):
    """
    output the arguments to the console

    Args:
        args (Namespace): the namespace to print arguments for
    """
    logger.info('arguments')
    indent = ' '
    for arg, val in sorted(args.__dict__.items()):
        if isinstance(val, list):
            if len(val) <= 1:
                logger.info(f'{indent}{arg} = {val}')
                continue
            logger.info(f'{indent}{arg} = [')
            for v in val:
                logger.info(f'{indent * 2}{repr(v)}')
            logger.info(f'{indent}]')
        else:
            logger.info(f'{indent}{arg} = {repr(val)}')


def mkdirp(dirname: str) -> str:
    """
    Make a directory or path of directories. Does nothing if the directory already exists
    """
    if dirname and not os.path.isdir(dirname):
        logger.info(f"creating output directory: '{dirname}'")
        os.makedirs(dirname, exist_ok=True)
    return dirname
