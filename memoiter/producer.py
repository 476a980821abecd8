from typing import Callable, Iterable, Iterator, Optional, TypeVar

__all__ = [
    'Producer',
    'as_producer',
    'successors',
]


T = TypeVar('T')

# A producer is anything that yields its next value on next() and raises StopIteration once it is exhausted.
# It is single-pass: values it has yielded are gone from its own state.
Producer = Iterator[T]


def as_producer(source: Iterable[T]) -> Producer[T]:
    '''Adapt the given iterable (a list, a generator, a range, ...) to a producer.'''
    try:
        return iter(source)
    except TypeError:
        raise TypeError('Cannot produce values from {0!r}: object of type {1} is not iterable.'.format(source, type(source).__name__)) from None


def successors(first: Optional[T], step: Callable[[T], Optional[T]]) -> Producer[T]:
    '''Yield `first`, then repeatedly the result of applying `step` to the previous value.

    Stops as soon as `step` returns None, or immediately if `first` is None.
    The Fibonacci numbers, for example, are the first components of

        successors((0, 1), lambda p: (p[1], p[0] + p[1]))
    '''
    value = first
    while value is not None:
        yield value
        value = step(value)
