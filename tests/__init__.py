import logging

from .testutils import env_flag

MEMESITES_DEBUG = env_flag('MEMESITES_DEBUG')

DEBUG_FORMAT = '%(asctime)s %(name)20s:%(lineno)-5s %(levelname)-8s | %(message)s'
INFO_FORMAT = '%(asctime)s %(levelname)-8s | %(message)s'


def _configure_logging(debug=False):
    handler = logging.StreamHandler()
    if debug:
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
    else:
        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter(INFO_FORMAT, datefmt='%Y-%m-%d %H:%M'))

    root = logging.getLogger('')
    root.setLevel(logging.DEBUG if debug else logging.INFO)
    root.addHandler(handler)

    # the reader logs every site section it enters at debug level
    logging.getLogger('memesites').setLevel(logging.DEBUG if debug else logging.INFO)


_configure_logging(MEMESITES_DEBUG)
