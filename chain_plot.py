import numpy as np
import matplotlib.pyplot as plt


def chain_lengths(counter):
    return np.array(counter.chain_lengths(), dtype=np.int64)


def bucket_stats(counter):
    """Summarises how evenly the words are spread over the buckets"""
    lengths = chain_lengths(counter)
    used = lengths[lengths > 0]
    return {
        "buckets_used": int(used.size),
        "empty_buckets": int(lengths.size - used.size),
        "longest_chain": int(lengths.max()) if lengths.size else 0,
        "mean_chain": float(used.mean()) if used.size else 0.0,
        "collisions": int((used - 1).sum()),
    }


def plot_chain_lengths(counter, path="chains.png"):
    lengths = chain_lengths(counter)
    xs = np.arange(lengths.size)

    fig, ax = plt.subplots()
    ax.bar(xs, lengths, width=1.0, label="Chain length")
    if lengths.size:
        ax.axhline(lengths.mean(), color="red", linestyle="--", label="Mean (all buckets)")
    ax.set_xlabel("Bucket")
    ax.set_ylabel("Words")
    ax.set_title(f"{counter.get_unique_word_count()} words in {counter.get_capacity()} buckets")
    ax.legend()
    fig.savefig(path)
    plt.close(fig)
    return path
