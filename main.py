import argparse
import sys

from english import words_from_file, remove_common_words, split_line
from word_counter import WordCounter, MIN_CAPACITY


def round_to_three(n):
    # Truncates, 0.7279 shows as 0.727
    return int(n * 1000.0) / 1000.0


def add_words_from_file(filename, counter):
    """Adds every word in the file to counter, returns the words in the order they were first seen"""
    words_added = []
    for word in words_from_file(filename):
        old_unique = counter.get_unique_word_count()
        counter.add_word(word)
        if counter.get_unique_word_count() > old_unique:
            words_added.append(word)
    return words_added


def display_statistics(counter):
    print("\nWord counter statistics:")
    print(f"        Capacity: {counter.get_capacity()}")
    print(f"        Unique  : {counter.get_unique_word_count()}")
    print(f"        Total   : {counter.get_total_word_count()}")
    print(f"        Load    : {round_to_three(counter.get_load_factor())}")


def display_word_counts(words_to_analyze, counter, show_lookups=False):
    print("Analysis of words:")
    for word in split_line(words_to_analyze):
        if show_lookups:
            count, lookups = counter.lookup_word_count(word)
            print(f"        {word}: {count} ({lookups} lookups)")
        else:
            print(f"        {word}: {counter.get_word_count(word)}")


def display_bucket_stats(stats):
    print("\nBucket statistics:")
    print(f"        Used      : {stats['buckets_used']}")
    print(f"        Empty     : {stats['empty_buckets']}")
    print(f"        Longest   : {stats['longest_chain']}")
    print(f"        Mean      : {round_to_three(stats['mean_chain'])}")
    print(f"        Collisions: {stats['collisions']}")


def check_copy(counter, copy, words_added, kind):
    """Prints a line for every way copy differs from counter, prints nothing if they match"""
    if counter.get_unique_word_count() != copy.get_unique_word_count():
        print(f"{kind} failed: mismatching unique word count.")
    if counter.get_total_word_count() != copy.get_total_word_count():
        print(f"{kind} failed: mismatching total word count.")
    if counter.get_load_factor() != copy.get_load_factor():
        print(f"{kind} failed: mismatching load factor.")

    for word in words_added:
        if counter.get_word_count(word) != copy.get_word_count(word):
            print(f"{kind} failed: mismatching word count for \"{word}\".")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Count the words in a text file")
    parser.add_argument("filename", nargs="?", help="text file to read, asked for if left out")
    parser.add_argument("--capacity", type=int, default=MIN_CAPACITY, help="starting number of buckets")
    parser.add_argument("--plot", default=None, help="save a chart of the chain lengths to this path")
    parser.add_argument("--verbose", action="store_true", help="print resizes, lookups per word and bucket statistics")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    filename = args.filename or input("What is the filename? ")

    counter = WordCounter(args.capacity, verbose=args.verbose)
    try:
        words_added = add_words_from_file(filename, counter)
    except (OSError, UnicodeDecodeError):
        print("Error: unable to read file.")
        sys.exit(1)

    remove_common_words(counter)
    display_statistics(counter)

    words_to_analyze = input("\nEnter words (separated by a space): ")
    display_word_counts(words_to_analyze, counter, show_lookups=args.verbose)

    if args.verbose or args.plot:
        # Only pull matplotlib in when the bucket report is actually wanted
        from chain_plot import bucket_stats, plot_chain_lengths
        display_bucket_stats(bucket_stats(counter))
    if args.plot:
        print(f"Chain lengths saved to {plot_chain_lengths(counter, args.plot)}")

    # Nothing should print here
    check_copy(counter, counter.copy(), words_added, "Copy")
    assigned = WordCounter()
    assigned.assign(counter)
    check_copy(counter, assigned, words_added, "Assignment")


if __name__ == "__main__":
    main()
