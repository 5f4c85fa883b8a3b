"""Classic searching, sorting, divide-and-conquer and combinatorics algorithms, with arrays, queues, union-find, a hash map and balanced search trees."""

__version__ = "0.1.0"