from chain_plot import bucket_stats, chain_lengths, plot_chain_lengths
from word_counter import WordCounter


def test_chain_lengths():
    t = WordCounter(hash_function=lambda word: len(word))
    for word in ["a", "b", "c", "dd", "eee"]:
        t.add_word(word)

    lengths = chain_lengths(t)
    assert lengths.size == 11
    assert lengths.tolist() == [0, 3, 1, 1, 0, 0, 0, 0, 0, 0, 0]
    assert lengths.sum() == t.get_unique_word_count()


def test_bucket_stats():
    t = WordCounter(hash_function=lambda word: len(word))
    for word in ["a", "b", "c", "dd", "eee"]:
        t.add_word(word)

    stats = bucket_stats(t)
    assert stats == {
        "buckets_used": 3,
        "empty_buckets": 8,
        "longest_chain": 3,
        "mean_chain": 5 / 3,
        "collisions": 2,
    }

    empty = bucket_stats(WordCounter())
    assert empty["buckets_used"] == 0
    assert empty["mean_chain"] == 0.0
    assert empty["collisions"] == 0


def test_plot_chain_lengths(tmp_path):
    t = WordCounter()
    for i in range(40):
        t.add_word(f"word{i}")

    path = tmp_path / "chains.png"
    assert plot_chain_lengths(t, path) == path
    assert path.stat().st_size > 0
