import logging
from .errors import ConsumedError
from .producer import Producer, as_producer, successors
from .sequence import MemoizedSequence, memoized_generator

__all__ = [
    'ConsumedError',
    #
    'Producer',
    'as_producer',
    'successors',
    #
    'MemoizedSequence',
    'memoized_generator',
]

# Set up logging. By default, do not output any log messages from library code.
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())
