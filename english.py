from re import sub, search


# Words too common to be worth counting, these get removed after a file is loaded
COMMON_WORDS = (
    "a", "about", "after", "all", "also", "an", "and", "any", "are", "as",
    "at", "be", "because", "been", "but", "by", "can", "come", "could", "day",
    "did", "do", "even", "first", "for", "from", "get", "give", "go", "good",
    "had", "has", "have", "he", "her", "him", "his", "how", "i", "if",
    "in", "into", "is", "it", "its", "just", "know", "like", "look", "make",
    "me", "most", "my", "new", "no", "not", "now", "of", "on", "one",
    "only", "or", "other", "our", "out", "over", "people", "say", "see", "she",
    "so", "some", "take", "than", "that", "the", "their", "them", "then", "there",
    "these", "they", "think", "this", "time", "to", "two", "up", "us", "use",
    "want", "was", "way", "we", "well", "were", "what", "when", "which", "who",
    "will", "with", "work", "would", "year", "you", "your",
)


def split_line(line):
    return line.split()


def clean_word(token):
    """Lowercases the token and strips everything but letters, digits and hyphens.
    A trailing hyphen is kept, it means the word carries on somewhere else
    """
    word = sub("[^a-z0-9-]", "", token.lower()).lstrip("-")
    if search("[a-z0-9]", word) is None:
        return ""
    return word


def words_from_lines(lines):
    """Yields the cleaned words of lines, in order.

    A word that ends with a hyphen is either a hyphen used mid line (it just gets dropped),
    or a word broken over two lines, which is put back together with the first word of the next line
    """
    lines = iter(lines)
    for line in lines:
        tokens = split_line(line)
        while tokens:
            word = clean_word(tokens.pop(0))
            if not word:
                continue

            if word.endswith("-"):
                if tokens:
                    word = word[:-1]
                else:
                    # The next line is used up here, whatever is left of it is processed as normal
                    tokens = split_line(next(lines, ""))
                    word = word[:-1] + (tokens.pop(0) if tokens else "")
                word = clean_word(word).rstrip("-")
                if not word:
                    continue

            yield word


def words_from_file(path):
    with open(path, "r", encoding="utf-8") as file:
        yield from words_from_lines(file)


def remove_common_words(counter, common_words=COMMON_WORDS):
    for word in common_words:
        counter.remove_word(word)
