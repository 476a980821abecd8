#!/usr/bin/env python3
import logging
import memoiter

memoiter.log.addHandler(logging.StreamHandler())
memoiter.log.setLevel(logging.DEBUG)


def main():
    factorial = memoiter.MemoizedSequence(acc for (n, acc) in memoiter.successors((0, 1), lambda p: (p[0] + 1, (p[0] + 1) * p[1])))

    # Computing 1000! also computes every smaller factorial
    print(len(str(factorial.get(1000))), 'digits')
    print(factorial[:8])

    # A finite producer: indices past its end are simply absent
    primes = memoiter.MemoizedSequence([2, 3, 5, 7])
    for idx in range(6):
        value = primes.get(idx)
        if value is not None:
            print('p({0}) = {1}'.format(idx, value))
        else:
            print('p({0}) is not defined'.format(idx))

    # Generator functions can be memoized directly
    @memoiter.memoized_generator
    def collatz(start):
        n = start
        while n != 1:
            yield n
            n = n // 2 if n % 2 == 0 else 3 * n + 1
        yield 1

    print(list(collatz(27))[:10])
    print('steps:', len(list(collatz(27))) - 1)

if __name__ == '__main__':
    main()
