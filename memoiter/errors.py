__all__ = [
    'ConsumedError',
]


class ConsumedError(RuntimeError):
    '''Raised when a MemoizedSequence is used after its contents have been taken.'''
