import functools
import logging
from operator import index as as_index, length_hint
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union  # noqa
from .errors import ConsumedError
from .producer import Producer, as_producer

__all__ = [
    'MemoizedSequence',
    'memoized_generator',
]

log = logging.getLogger(__name__)


T = TypeVar('T')


class MemoizedSequence(Generic[T], Iterator[T]):
    '''Pairs a producer with a list that stores every value the producer returns.

    Past values can be retrieved by index without asking the producer again.
    Requesting an index that has not been produced yet advances the producer up to that index,
    keeping all intermediate values as byproducts:

        >>> from memoiter import successors
        >>> fib = MemoizedSequence(a for (a, b) in successors((0, 1), lambda p: (p[1], p[0] + p[1])))
        >>> fib.get(9)
        34
        >>> fib.get(3)      # computed on the way to index 9
        2
        >>> fib.take()[0]
        [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]

    The producer is assumed to be deterministic and single-pass.
    Instances are not thread-safe; calls that may advance the producer must be synchronized
    if the same instance is used from multiple threads.
    '''

    def __init__(self, producer: Iterable[T]) -> None:
        self._producer = as_producer(producer)  # type: Optional[Producer[T]]
        self._cache = []  # type: Optional[List[T]]
        self._exhausted = False
        self._consumed = False

    @property
    def exhausted(self) -> bool:
        '''True iff the producer has signalled that it has no more values.'''
        return self._exhausted

    @property
    def cached_length(self) -> int:
        '''The number of values that have been produced (and stored) so far.'''
        self._check_not_consumed()
        return len(self._cache)

    def _check_not_consumed(self) -> None:
        if self._consumed:
            raise ConsumedError('The contents of this MemoizedSequence have already been taken.')

    def _expand_to_contain(self, idx: int) -> bool:
        '''Advance the producer until the value at `idx` is cached. Returns False if the producer is exhausted before that.'''
        self._check_not_consumed()
        cache = self._cache
        if idx < len(cache):
            return True
        if self._exhausted:
            return False
        log.debug('MemoizedSequence: Advancing producer from index %d to %d', len(cache), idx)
        while len(cache) <= idx:
            # Only StopIteration is handled here, any other error of the producer reaches the caller unchanged.
            try:
                value = next(self._producer)
            except StopIteration:
                self._exhausted = True
                log.debug('MemoizedSequence: Producer exhausted after %d values', len(cache))
                return False
            cache.append(value)
        return True

    def get(self, idx: int, default: Optional[T] = None) -> Optional[T]:
        '''Return the value at index `idx`, producing it (and all values before it) if necessary.

        Returns `default` if the producer is exhausted before reaching `idx`.
        '''
        idx = as_index(idx)
        if idx < 0:
            raise ValueError('Index must be non-negative, got {0}.'.format(idx))
        if self._expand_to_contain(idx):
            return self._cache[idx]
        else:
            return default

    def __getitem__(self, key: Union[int, slice]) -> Union[T, List[T]]:
        if isinstance(key, slice):
            return self._get_slice(key)
        idx = as_index(key)
        if idx < 0:
            raise ValueError('Negative indices are not supported, got {0}.'.format(idx))
        if self._expand_to_contain(idx):
            return self._cache[idx]
        raise IndexError('MemoizedSequence index out of range: the producer was exhausted after {0} values.'.format(len(self._cache)))

    def _get_slice(self, key: slice) -> List[T]:
        start = 0 if key.start is None else as_index(key.start)
        stop = None if key.stop is None else as_index(key.stop)
        step = 1 if key.step is None else as_index(key.step)
        if start < 0 or (stop is not None and stop < 0):
            raise ValueError('Negative slice bounds are not supported.')
        if step <= 0:
            raise ValueError('Slice step must be positive, got {0}.'.format(step))
        values = []  # type: List[T]
        pos = start
        while (stop is None or pos < stop) and self._expand_to_contain(pos):
            values.append(self._cache[pos])
            pos += step
        return values

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        '''Produce the next value, store it and return it.'''
        if not self._expand_to_contain(self.cached_length):
            raise StopIteration
        return self._cache[-1]

    def __length_hint__(self) -> int:
        self._check_not_consumed()
        if self._exhausted:
            return len(self._cache)
        return len(self._cache) + length_hint(self._producer)

    def replay(self, start: int = 0) -> Iterator[T]:
        '''Iterate over the sequence from index `start`, using cached values where possible.

        Unlike next(), this does not depend on how far the producer has already been advanced.
        Any number of replays may be active at the same time.
        '''
        start = as_index(start)
        if start < 0:
            raise ValueError('Start index must be non-negative, got {0}.'.format(start))
        self._check_not_consumed()
        return self._replay_from(start)

    def _replay_from(self, pos: int) -> Iterator[T]:
        while self._expand_to_contain(pos):
            yield self._cache[pos]
            pos += 1

    def take(self) -> Tuple[List[T], Producer[T]]:
        '''Return the list of produced values together with the (possibly exhausted) producer.

        This ends the life of the MemoizedSequence: any further use raises ConsumedError.
        '''
        self._check_not_consumed()
        cache, producer = self._cache, self._producer
        self._cache = None
        self._producer = None
        self._consumed = True
        log.debug('MemoizedSequence: Taken with %d cached values', len(cache))
        return cache, producer

    def __repr__(self) -> str:
        if self._consumed:
            return '<MemoizedSequence (consumed)>'
        return '<MemoizedSequence: {0} cached{1}>'.format(len(self._cache), ', exhausted' if self._exhausted else '')


def memoized_generator(func: Callable[..., Iterable[T]]) -> Callable[..., Iterator[T]]:
    '''Decorator that memoizes the values of a generator function.

    The generator is run at most once per distinct set of arguments.
    Each call of the decorated function returns a new iterator over the shared values,
    and `func.sequence_for(*args, **kwargs)` gives access to the underlying MemoizedSequence.
    Arguments must be hashable.
    '''
    sequences = {}  # type: Dict[Any, MemoizedSequence[T]]

    def sequence_for(*args, **kwargs) -> MemoizedSequence[T]:
        key = (args, frozenset(kwargs.items()))
        if key not in sequences:
            sequences[key] = MemoizedSequence(func(*args, **kwargs))
        return sequences[key]

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Iterator[T]:
        return sequence_for(*args, **kwargs).replay()

    wrapper.sequence_for = sequence_for  # type: ignore
    return wrapper
