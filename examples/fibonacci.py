#!/usr/bin/env python3
import logging
import memoiter

# Enable debug messages from memoiter
memoiter.log.addHandler(logging.StreamHandler())
memoiter.log.setLevel(logging.DEBUG)


def main():
    fibonacci = memoiter.MemoizedSequence(a for (a, b) in memoiter.successors((0, 1), lambda p: (p[1], p[0] + p[1])))

    print(fibonacci.get(0), fibonacci.get(1), fibonacci.get(4), fibonacci.get(9))
    # Calculated as a byproduct of the 9th term, the producer is not advanced again
    print(fibonacci.get(3))

    sequence, _ = fibonacci.take()
    print(sequence)

if __name__ == '__main__':
    main()
