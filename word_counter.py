import numpy as np
from time import time_ns


MIN_CAPACITY = 11
MAX_CAPACITY = 993815743
NEW_WORD_COUNT = 1
MAX_LOAD_FACTOR = 0.75
MIN_LOAD_FACTOR = 0.30

# Every capacity the table can have. Each prime is roughly 1.2x the one before it,
# so doubling or halving always lands on one of these
PRIMES = np.array([
    MIN_CAPACITY, 13, 17, 19, 23, 29, 31, 37, 43, 53, 67, 79, 97, 107,
    131, 157, 191, 223, 269, 331, 389, 461, 557, 673, 797, 967, 1151,
    1381, 1657, 1979, 2377, 2851, 3433, 4111, 4931, 5923, 7103, 8513,
    10211, 12251, 14699, 17657, 21169, 25409, 30491, 36583, 43889,
    52667, 63199, 75853, 91009, 109211, 131059, 157259, 188707,
    226451, 271753, 326087, 391331, 469583, 563489, 676171, 811411,
    973691, 1168451, 1402123, 1682531, 2019037, 2422873, 2907419,
    3488897, 4186673, 5024009, 6028807, 7234589, 8681483, 10417769,
    12501331, 15001603, 18001909, 21602311, 25922749, 31107317,
    37328761, 44794513, 53753431, 64504081, 77404907, 92885893,
    111463049, 133755659, 160506817, 192608173, 231129781, 277355759,
    332826869, 399392243, 479270713, 575124829, 690149821, 828179753,
    MAX_CAPACITY,
], dtype=np.int64)
PRIMES.flags.writeable = False


def valid_capacity(capacity) -> int:
    """Returns the smallest prime in PRIMES that is >= capacity, or MAX_CAPACITY if capacity is bigger than all of them"""
    if capacity >= MAX_CAPACITY:
        return MAX_CAPACITY
    return int(PRIMES[np.searchsorted(PRIMES, capacity, side="left")])


class WordEntry:
    def __init__(self, word, count=NEW_WORD_COUNT):
        self.word = word
        self.count = count

    def __repr__(self):
        return f"WordEntry({self.word!r}, {self.count})"


class WordCounter:
    """Hash table of words and how many times each one was added.

    Buckets are plain lists of WordEntry objects (separate chaining), or None while empty. A word that lands
    in a bucket for the first time goes to the front of that bucket. The table grows when
    the load factor goes over MAX_LOAD_FACTOR and shrinks when it drops under MIN_LOAD_FACTOR,
    always to a capacity taken from PRIMES.
    """

    def __init__(self, capacity=MIN_CAPACITY, hash_function=hash, verbose=False):
        # Not really meant to be changed, for debugging (a constant hash puts everything in one bucket)
        self.hash_function = hash_function
        self.verbose = verbose
        self._initialize(valid_capacity(capacity))

    def _initialize(self, capacity):
        self.capacity = capacity
        self.total_word_count = 0
        self.unique_word_count = 0
        # A bucket stays None until a word lands in it
        self.table = [None] * capacity

    def _bucket(self, word, capacity) -> int:
        return self.hash_function(word) % capacity

    def _find(self, word):
        """Returns (bucket, position in bucket) for word, position is None if it isn't there"""
        bucket = self._bucket(word, self.capacity)
        for position, entry in enumerate(self.table[bucket] or ()):
            if entry.word == word:
                return bucket, position
        return bucket, None

    def add_word(self, word) -> int:
        bucket, position = self._find(word)

        if position is None:
            entry = WordEntry(word)
            if self.table[bucket] is None:
                self.table[bucket] = [entry]
            else:
                self.table[bucket].insert(0, entry)
            self.unique_word_count += 1
            self.total_word_count += 1
            if self.get_load_factor() > MAX_LOAD_FACTOR and self.capacity < MAX_CAPACITY:
                self._resize(self.capacity * 2)
            return entry.count

        entry = self.table[bucket][position]
        entry.count += 1
        self.total_word_count += 1
        return entry.count

    def remove_word(self, word):
        bucket, position = self._find(word)
        if position is None:
            return

        # Removing a word throws away every time it was counted, not just one
        entry = self.table[bucket].pop(position)
        if not self.table[bucket]:
            self.table[bucket] = None
        self.total_word_count -= entry.count
        self.unique_word_count -= 1

        if self.get_load_factor() < MIN_LOAD_FACTOR and self.capacity > MIN_CAPACITY:
            self._resize(self.capacity // 2)

    def get_word_count(self, word) -> int:
        bucket, position = self._find(word)
        if position is None:
            return 0
        return self.table[bucket][position].count

    def get_load_factor(self) -> float:
        return self.unique_word_count / self.capacity

    def get_unique_word_count(self) -> int:
        return self.unique_word_count

    def get_total_word_count(self) -> int:
        return self.total_word_count

    def is_empty(self) -> bool:
        return self.total_word_count == 0

    def get_capacity(self) -> int:
        return self.capacity

    def _entries(self):
        for chain in self.table:
            if chain is not None:
                yield from chain

    def chain_lengths(self):
        """Number of words in each bucket, empty buckets included"""
        return [0 if chain is None else len(chain) for chain in self.table]

    def lookup_word_count(self, word):
        """Returns (count, lookups), lookups being how many entries were looked at to find the answer"""
        chain = self.table[self._bucket(word, self.capacity)] or ()
        lookups = 0
        for entry in chain:
            lookups += 1
            if entry.word == word:
                return entry.count, lookups
        return 0, lookups

    def _resize(self, new_capacity):
        """Moves every entry into a freshly allocated table of (the valid version of) new_capacity.
        The counters don't change, only where the entries live
        """
        new_capacity = valid_capacity(new_capacity)
        if self.verbose:
            print(f"Resizing from {self.capacity} to {new_capacity} buckets for {self.unique_word_count} words")
        time = time_ns()

        new_table = [None] * new_capacity
        for entry in self._entries():
            bucket = self._bucket(entry.word, new_capacity)
            if new_table[bucket] is None:
                new_table[bucket] = [entry]
            else:
                new_table[bucket].insert(0, entry)

        # Swap both at once, so the table is never looked at with the wrong modulus
        self.table, self.capacity = new_table, new_capacity

        if self.verbose:
            print(f"Resize finished in {(time_ns() - time)/1000000000} seconds")

    def clear(self):
        """Drops every entry, the capacity stays where it is"""
        self._initialize(self.capacity)

    def copy(self):
        """Returns a new WordCounter with its own buckets and entries, nothing is shared with this one"""
        other = type(self).__new__(type(self))
        other.verbose = self.verbose
        other._copy_from(self)
        return other

    def assign(self, other):
        """Throws away what this table holds, then becomes a deep copy of other"""
        if other is self:
            return self
        self.clear()
        self._copy_from(other)
        return self

    def _copy_from(self, other):
        self.capacity = other.capacity
        self.total_word_count = other.total_word_count
        self.unique_word_count = other.unique_word_count
        # Same words in the same spots, but every entry is a new object
        self.table = [None if chain is None else [WordEntry(entry.word, entry.count) for entry in chain]
                      for chain in other.table]
        self.hash_function = other.hash_function

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __len__(self):
        return self.unique_word_count

    def __contains__(self, word):
        return self._find(word)[1] is not None

    def __getitem__(self, word):
        return self.get_word_count(word)

    def __iter__(self):
        for entry in self._entries():
            yield entry.word, entry.count

    def __repr__(self):
        return (f"WordCounter(capacity={self.capacity}, unique={self.unique_word_count}, "
                f"total={self.total_word_count})")

